# Main application file



import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from meromart.database import engine, Base
from meromart.core.rate_limiter import limiter
from meromart.core.config import settings
from meromart.routers import (
    auth,
    bills,
    invoices,
    products,
    expenses,
    sales,
    users,
    settings as store_settings,
    reports,
    health,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("meromart")


# SCHEMA

if settings.AUTO_CREATE_TABLES:
    Base.metadata.create_all(bind=engine)


# APP INIT

app = FastAPI(
    title="MeroMart Billing API",
    description="Point-of-sale billing, expenses and sales reporting for a small store",
    version="1.0.0",
)



# CORS (cookie session, so credentials are allowed)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Requested-With"],
    max_age=86400,
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler
)


# ERROR BODIES: every failure is {"error": "..."}

def validation_message(errors) -> str:
    if not errors:
        return "Invalid request"

    error = errors[0]
    if error.get("type") == "json_invalid":
        return "Invalid JSON"

    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)

    if not field:
        return "Invalid JSON"

    if error.get("type") == "missing":
        return f"Missing required field: {field}"

    return f"Invalid value for field {field}: {error.get('msg')}"


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": validation_message(exc.errors())},
    )


@app.exception_handler(ValidationError)
async def payload_validation_handler(request: Request, exc: ValidationError):
    # Raised by action-dispatch routes that validate their own payloads
    return JSONResponse(
        status_code=400,
        content={"error": validation_message(exc.errors())},
    )


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# ROUTERS

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(bills.router)
app.include_router(invoices.router)
app.include_router(products.router)
app.include_router(expenses.router)
app.include_router(sales.router)
app.include_router(users.router)
app.include_router(store_settings.router)
app.include_router(reports.router)
