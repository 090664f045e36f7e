# =========================================================
# SETTINGS ROUTER (ACTION DISPATCH)
#
# One endpoint, the action comes from ?action= or from the
# JSON body's "action" key:
#
# ANY LOGGED-IN USER:
# - get_users, get_store_settings, get_categories
# - change_password (own account)
#
# ADMINS ONLY:
# - add_user, edit_user, delete_user
# - update_store_settings
# - add_category, edit_category, delete_category
# =========================================================

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meromart.database import get_db
from meromart.core.accounts import create_user
from meromart.core.auth import get_current_user
from meromart.core.hashing import hash_password, verify_password
from meromart.models.expenses import ExpenseCategory
from meromart.models.store_settings import StoreSettings
from meromart.models.users import User
from meromart.schemas.expense import ExpenseCategoryResponse
from meromart.schemas.store_settings import (
    CategorySave,
    StoreSettingsResponse,
    StoreSettingsUpdate,
)
from meromart.schemas.user import PasswordChange, UserCreate, UserEdit, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


# =========================================================
# STORE SETTINGS ROW
# =========================================================
def get_store_settings(db: Session) -> StoreSettings:
    store = db.query(StoreSettings).order_by(StoreSettings.id).first()

    if store is None:
        store = StoreSettings()
        db.add(store)
        db.commit()
        db.refresh(store)

    return store


def _as_id(value, label: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail=f"Missing {label} id")


def _require_admin(user: User):
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


def _commit(db: Session, action: str):
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Settings action {action} failed: {exc}")
        raise HTTPException(status_code=500, detail="Internal server error")


# =========================================================
# USERS
# =========================================================
def _get_users(db, payload, user):
    users = db.query(User).order_by(User.id).all()
    return [UserResponse.model_validate(u).model_dump(mode="json") for u in users]


def _add_user(db, payload, user):
    _require_admin(user)
    data = UserCreate.model_validate(payload.get("user") or {})

    new_user = create_user(
        db,
        name=data.name,
        email=data.email,
        password=data.password,
        role=data.role,
        phone=data.phone,
        address=data.address,
    )
    _commit(db, "add_user")

    return {"message": "User added", "id": new_user.id}


def _edit_user(db, payload, user):
    _require_admin(user)
    data = UserEdit.model_validate(payload.get("user") or {})

    target = db.query(User).filter(User.id == data.id).first()
    if not target:
        raise HTTPException(status_code=404, detail="User not found")

    clash = (
        db.query(User)
        .filter(func.lower(User.email) == data.email, User.id != data.id)
        .first()
    )
    if clash:
        raise HTTPException(status_code=409, detail="Email already registered")

    for field, value in data.model_dump(exclude={"id"}).items():
        setattr(target, field, value)
    _commit(db, "edit_user")

    return {"message": "User updated"}


def _delete_user(db, payload, user):
    _require_admin(user)
    user_id = _as_id(payload.get("id"), "user")

    if user_id == user.id:
        raise HTTPException(status_code=400, detail="You cannot delete your own account")

    db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    _commit(db, "delete_user")

    return {"message": "User deleted"}


def _change_password(db, payload, user):
    if not payload.get("old_password") or not payload.get("new_password"):
        raise HTTPException(status_code=400, detail="Missing password")
    data = PasswordChange.model_validate(payload)

    if not verify_password(data.old_password, user.password_hash):
        raise HTTPException(status_code=403, detail="Incorrect old password")

    user.password_hash = hash_password(data.new_password)
    _commit(db, "change_password")

    return {"message": "Password changed"}


# =========================================================
# STORE SETTINGS
# =========================================================
def _get_store_settings(db, payload, user):
    store = get_store_settings(db)
    return StoreSettingsResponse.model_validate(store).model_dump(mode="json")


def _update_store_settings(db, payload, user):
    _require_admin(user)
    data = StoreSettingsUpdate.model_validate(payload.get("settings") or {})

    store = get_store_settings(db)
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(store, field, value)
    _commit(db, "update_store_settings")

    return {"message": "Store settings updated"}


# =========================================================
# EXPENSE CATEGORIES
# =========================================================
def _get_categories(db, payload, user):
    categories = db.query(ExpenseCategory).order_by(ExpenseCategory.name).all()
    return [
        ExpenseCategoryResponse.model_validate(c).model_dump(mode="json", by_alias=True)
        for c in categories
    ]


def _add_category(db, payload, user):
    _require_admin(user)
    data = CategorySave.model_validate(payload.get("category") or {})

    existing = (
        db.query(ExpenseCategory)
        .filter(func.lower(ExpenseCategory.name) == data.name.strip().lower())
        .first()
    )
    if existing:
        raise HTTPException(status_code=409, detail="Category already exists")

    category = ExpenseCategory(**data.model_dump(exclude={"id"}))
    category.name = data.name.strip()
    db.add(category)
    _commit(db, "add_category")

    return {"message": "Category added", "id": category.id}


def _edit_category(db, payload, user):
    _require_admin(user)
    data = CategorySave.model_validate(payload.get("category") or {})
    if data.id is None:
        raise HTTPException(status_code=400, detail="Missing category id")

    category = db.query(ExpenseCategory).filter(ExpenseCategory.id == data.id).first()
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    for field, value in data.model_dump(exclude={"id"}).items():
        setattr(category, field, value)
    _commit(db, "edit_category")

    return {"message": "Category updated"}


def _delete_category(db, payload, user):
    _require_admin(user)
    category_id = _as_id(payload.get("id"), "category")

    db.query(ExpenseCategory).filter(ExpenseCategory.id == category_id).delete(
        synchronize_session=False
    )
    _commit(db, "delete_category")

    return {"message": "Category deleted"}


ACTIONS = {
    "get_users": _get_users,
    "add_user": _add_user,
    "edit_user": _edit_user,
    "delete_user": _delete_user,
    "change_password": _change_password,
    "get_store_settings": _get_store_settings,
    "update_store_settings": _update_store_settings,
    "get_categories": _get_categories,
    "add_category": _add_category,
    "edit_category": _edit_category,
    "delete_category": _delete_category,
}


def _dispatch(action: str | None, payload: dict, db: Session, user: User):
    handler = ACTIONS.get(action or "")
    if handler is None:
        raise HTTPException(status_code=400, detail="Invalid action")
    return handler(db, payload, user)


@router.get("")
def settings_query(
    action: str | None = Query(None),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return _dispatch(action, {}, db, current_user)


@router.post("")
def settings_command(
    payload: dict | None = Body(None),
    action: str | None = Query(None),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    payload = payload or {}
    return _dispatch(payload.get("action") or action, payload, db, current_user)
