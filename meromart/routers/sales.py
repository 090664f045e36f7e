# =========================================================
# SALES ROUTER
#
# Sales rows are mostly written by the billing flow (one per
# bill item). This router lists them for the sales report and
# accepts manually recorded sales.
#
# Both endpoints need a logged-in user.
# =========================================================

from datetime import date, datetime, timedelta
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meromart.database import get_db
from meromart.core.auth import get_current_user
from meromart.models.sales import Sale
from meromart.schemas.sale import SaleCreate, SaleResponse

router = APIRouter(prefix="/sales", tags=["Sales"])

Period = Literal["daily", "weekly", "monthly", "quarterly", "yearly", "all"]


# =========================================================
# PERIOD WINDOWS
# =========================================================
def period_range(period: str, today: date) -> tuple[date, date] | None:
    """Inclusive date window for a report period, ``None`` for all time."""
    if period == "daily":
        return today, today

    if period == "weekly":
        # ISO week, Monday to Sunday
        start = today - timedelta(days=today.weekday())
        return start, start + timedelta(days=6)

    if period == "monthly":
        start = today.replace(day=1)
        next_month = (start + timedelta(days=32)).replace(day=1)
        return start, next_month - timedelta(days=1)

    if period == "quarterly":
        start_month = ((today.month - 1) // 3) * 3 + 1
        start = today.replace(month=start_month, day=1)
        if start_month == 10:
            end = date(today.year, 12, 31)
        else:
            end = date(today.year, start_month + 3, 1) - timedelta(days=1)
        return start, end

    if period == "yearly":
        return date(today.year, 1, 1), date(today.year, 12, 31)

    return None


# =========================================================
# LIST SALES
# =========================================================
@router.get("", response_model=list[SaleResponse])
def list_sales(
    period: Period = Query("all"),
    search: str | None = Query(None),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    query = db.query(Sale)

    window = period_range(period, datetime.now().date())
    if window:
        query = query.filter(Sale.date_sold.between(*window))

    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Sale.product_name.ilike(pattern),
                Sale.category.ilike(pattern),
                Sale.user.ilike(pattern),
                Sale.invoice_number.ilike(pattern),
            )
        )

    return query.order_by(Sale.date_sold.desc(), Sale.id.desc()).all()


# =========================================================
# RECORD SALE MANUALLY
# =========================================================
@router.post("", status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_data: SaleCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    try:
        date_sold = date.fromisoformat(sale_data.date_sold)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail="Invalid date format. Use YYYY-MM-DD",
        )

    try:
        db.add(
            Sale(
                product_name=sale_data.product_name,
                invoice_number=sale_data.invoice_number,
                date_sold=date_sold,
                amount=sale_data.amount,
                category=sale_data.category,
                user=sale_data.user,
            )
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise HTTPException(status_code=500, detail="Internal server error")

    return {"message": "Sale added successfully"}
