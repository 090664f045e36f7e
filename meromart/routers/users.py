# meromart/routers/users.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from meromart.database import get_db
from meromart.models.users import User
from meromart.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return db.query(User).order_by(User.id).all()
