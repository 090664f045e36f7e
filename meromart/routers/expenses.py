# =========================================================
# EXPENSES ROUTER
#
# Reads are open to the dashboard. Every write needs a
# logged-in user, who is stamped as creator / last editor.
#
# Category lookups ride on ?action=, as the dashboard calls them:
# - getExpenseCategories          active managed categories
# - getDistinctExpenseCategories  categories already used
# - addExpenseCategory (POST)     create a managed category
# =========================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meromart.database import get_db
from meromart.core.auth import get_current_user
from meromart.models.expenses import Expense, ExpenseCategory
from meromart.models.users import User
from meromart.schemas.expense import (
    ExpenseCategoryCreate,
    ExpenseCategoryResponse,
    ExpenseResponse,
    ExpenseSave,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["Expenses"])


# =========================================================
# LIST EXPENSES / CATEGORIES
# =========================================================
@router.get("")
def list_expenses(
    action: str | None = Query(None),
    db: Session = Depends(get_db),
):
    if action == "getExpenseCategories":
        categories = (
            db.query(ExpenseCategory)
            .filter(ExpenseCategory.is_active.is_(True))
            .order_by(ExpenseCategory.name)
            .all()
        )
        return [
            ExpenseCategoryResponse.model_validate(c).model_dump(mode="json", by_alias=True)
            for c in categories
        ]

    if action == "getDistinctExpenseCategories":
        rows = (
            db.query(Expense.category)
            .filter(Expense.category.isnot(None), Expense.category != "")
            .distinct()
            .order_by(Expense.category)
            .all()
        )
        return [
            {
                "id": row.category,
                "name": row.category,
                "description": "",
                "color": "#6B7280",
                "isActive": True,
            }
            for row in rows
        ]

    if action:
        raise HTTPException(status_code=400, detail="Invalid action")

    expenses = db.query(Expense).order_by(Expense.date.desc(), Expense.id.desc()).all()
    return [
        ExpenseResponse.model_validate(e).model_dump(mode="json", by_alias=True)
        for e in expenses
    ]


# =========================================================
# ADD EXPENSE CATEGORY
# =========================================================
def _add_category(db: Session, category_data: ExpenseCategoryCreate):
    name = category_data.name.strip()

    existing = (
        db.query(ExpenseCategory)
        .filter(func.lower(ExpenseCategory.name) == name.lower())
        .first()
    )
    if existing:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Category already exists")

    try:
        db.add(
            ExpenseCategory(
                name=name,
                description=category_data.description,
                color=category_data.color,
                is_active=True,
            )
        )
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise HTTPException(status_code=500, detail=f"Failed to add category: {exc}")

    return {"message": "Category added"}


# =========================================================
# CREATE / UPDATE EXPENSE
# =========================================================
def _save_expense(db: Session, expense_data: ExpenseSave, current_user: User):
    values = expense_data.model_dump(exclude={"id"})
    now = datetime.now(timezone.utc)

    if expense_data.id:
        expense = db.query(Expense).filter(Expense.id == expense_data.id).first()
        if not expense:
            raise HTTPException(status_code=404, detail="Expense not found")

        for field, value in values.items():
            setattr(expense, field, value)
        expense.updated_at = now
        expense.updated_by = current_user.name
        message = "Expense updated"
    else:
        expense = Expense(created_by=current_user.name, **values)
        db.add(expense)
        message = "Expense added"

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Expense save failed: {exc}")
        raise HTTPException(status_code=500, detail=f"Database write failed: {exc}")

    return {"message": message, "id": expense.id}


@router.post("")
def save_expense(
    payload: dict = Body(...),
    action: str | None = Query(None),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    if action == "addExpenseCategory":
        return _add_category(db, ExpenseCategoryCreate.model_validate(payload))

    if action:
        raise HTTPException(status_code=400, detail="Invalid action")

    return _save_expense(db, ExpenseSave.model_validate(payload), current_user)


# =========================================================
# DELETE EXPENSE
# =========================================================
@router.delete("")
def delete_expense(
    id: int | None = Query(None),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    if id is None:
        raise HTTPException(status_code=400, detail="Missing id parameter")

    expense = db.query(Expense).filter(Expense.id == id).first()
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")

    db.delete(expense)
    db.commit()

    return {"message": "Expense deleted"}
