# schemas/report.py

from pydantic import BaseModel

from meromart.schemas.common import Money


class DashboardResponse(BaseModel):
    total_sales: Money
    total_expenses: Money
    net_profit: Money
    total_bills: int
    pending_bills: int
    low_stock_items: int
