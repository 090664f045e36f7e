# meromart/core/auth.py
#
# The session is resolved on every request: a Bearer header wins,
# otherwise the session cookie set by /login is used.

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from meromart.database import get_db
from meromart.models.users import User
from meromart.core.config import settings
from meromart.core.jwt import session_user_id

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)


def _resolve_token(request: Request, bearer_token: str | None):
    if bearer_token:
        return bearer_token
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def _load_user(token: str | None, db: Session):
    if not token:
        return None

    user_id = session_user_id(token)
    if user_id is None:
        return None

    user = db.query(User).filter(User.id == user_id).first()
    if user is None or not user.is_active:
        return None

    return user


def get_current_user(
    request: Request,
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
):
    user = _load_user(_resolve_token(request, token), db)

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )

    return user


def get_optional_user(
    request: Request,
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
):
    return _load_user(_resolve_token(request, token), db)
