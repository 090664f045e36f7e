# meromart/core/jwt.py
#
# Session tokens. The same signed token is handed out in the
# httponly session cookie and in the /login body for Bearer use.

from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError

from meromart.core.config import settings

SESSION_TOKEN_TYPE = "session"


def create_session_token(user, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )

    claims = {
        "sub": str(user.id),
        "name": user.name,
        "role": user.role,
        "type": SESSION_TOKEN_TYPE,
        "exp": expire,
    }

    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def session_user_id(token: str) -> int | None:
    """User id carried by a valid session token, ``None`` otherwise."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    if claims.get("type") != SESSION_TOKEN_TYPE:
        return None

    subject = claims.get("sub")
    if subject is None or not str(subject).isdigit():
        return None

    return int(subject)
