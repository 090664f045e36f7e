# meromart/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12

    # Session cookie (token-in-cookie, Authorization header also accepted)
    SESSION_COOKIE_NAME: str = "meromart_session"
    SESSION_COOKIE_SECURE: bool = False

    # Database
    DATABASE_URL: str
    AUTO_CREATE_TABLES: bool = True

    # Frontend
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:3001",
        "http://localhost",
        "http://127.0.0.1",
    ]

    RATE_LIMIT_ENABLED: bool = True

    # Bill numbering (store settings row overrides these when present)
    BILL_PREFIX: str = "B-"
    BILL_START_NUMBER: int = 1000
    BILL_NUMBER_MAX_ATTEMPTS: int = 3

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
    )


settings = Settings()
