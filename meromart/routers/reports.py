# =========================================================
# REPORTS ROUTER
#
# Dashboard totals:
# - sales are the net amounts of PAID bills
# - expenses are all recorded expenses
# - low stock counts products at or under their min_stock
#
# Schema-safe: money always comes back as a number (never None)
# =========================================================

from decimal import Decimal

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from meromart.database import get_db
from meromart.core.auth import get_current_user
from meromart.models.bills import Bill
from meromart.models.expenses import Expense
from meromart.models.products import Product
from meromart.schemas.report import DashboardResponse

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    total_sales = (
        db.query(func.coalesce(func.sum(Bill.net_amount), 0))
        .filter(Bill.status == "paid")
        .scalar()
    )

    total_expenses = (
        db.query(func.coalesce(func.sum(Expense.amount), 0))
        .scalar()
    )

    total_bills = db.query(func.count(Bill.bill_id)).scalar()

    pending_bills = (
        db.query(func.count(Bill.bill_id))
        .filter(Bill.status == "pending")
        .scalar()
    )

    low_stock_items = (
        db.query(func.count(Product.id))
        .filter(Product.stock <= Product.min_stock)
        .scalar()
    )

    total_sales = Decimal(str(total_sales or 0))
    total_expenses = Decimal(str(total_expenses or 0))

    return {
        "total_sales": total_sales,
        "total_expenses": total_expenses,
        "net_profit": total_sales - total_expenses,
        "total_bills": total_bills,
        "pending_bills": pending_bills,
        "low_stock_items": low_stock_items,
    }
