# meromart/core/accounts.py

import re

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from meromart.core.hashing import hash_password
from meromart.models.users import User


def next_employee_id(db: Session) -> str:
    """Highest numeric employee id plus one, zero padded to six digits."""
    highest = 0
    for (employee_id,) in db.query(User.employee_id).filter(User.employee_id.isnot(None)):
        if re.fullmatch(r"\d+", employee_id):
            highest = max(highest, int(employee_id))

    return str(highest + 1).zfill(6)


def create_user(
    db: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: str,
    phone: str | None = None,
    address: str | None = None,
) -> User:
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    user = User(
        name=name.strip(),
        email=email,
        password_hash=hash_password(password),
        role=role,
        employee_id=next_employee_id(db),
        phone=phone,
        address=address,
        is_active=True,
    )
    db.add(user)
    return user
