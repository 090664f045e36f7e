import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from meromart.database import get_db
from meromart.models.users import User
from meromart.schemas.user import UserLogin, UserRegister
from meromart.core.accounts import create_user
from meromart.core.hashing import verify_password
from meromart.core.jwt import create_session_token
from meromart.core.rate_limiter import limiter
from meromart.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


# ---------------- REGISTER ----------------
@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit("10/minute")
def register(request: Request, user_data: UserRegister, db: Session = Depends(get_db)):
    try:
        user = create_user(
            db,
            name=user_data.name,
            email=user_data.email,
            password=user_data.password,
            role=user_data.role,
        )
        db.commit()

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Registration failed for {user_data.email}: {exc}")
        raise HTTPException(status_code=500, detail=f"Registration failed: {exc}")

    logger.info(f"Registered {user.role} {user.email} as employee {user.employee_id}")

    return {
        "message": "User registered successfully",
        "role": user.role,
        "employee_id": user.employee_id,
    }


# ---------------- LOGIN (COOKIE SESSION + TOKEN) ----------------
@router.post("/login")
@limiter.limit("10/minute")
def login(
    request: Request,
    response: Response,
    credentials: UserLogin,
    db: Session = Depends(get_db),
):
    email = credentials.email.strip().lower()
    user = db.query(User).filter(User.email == email).first()

    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning(f"Failed login for {email}")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account is disabled")

    user.last_active = datetime.now(timezone.utc)
    db.commit()

    token = create_session_token(user)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )

    return {
        "message": "Login successful",
        "user": {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role,
        },
        "access_token": token,
        "token_type": "bearer",
    }


# ---------------- LOGOUT ----------------
@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}
