"""initial_billing_schema

Revision ID: 5f1c0a7d2b3e
Revises:
Create Date: 2026-10-19 09:12:44.481203
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5f1c0a7d2b3e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    # USERS
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("employee_id", sa.String(6), nullable=True),
        sa.Column("store_id", sa.String(50), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("last_active", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("employee_id"),
    )
    op.create_index("ix_users_id", "users", ["id"], unique=False)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # STORE SETTINGS
    op.create_table(
        "store_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("store_name", sa.String(255), nullable=False),
        sa.Column("store_address", sa.Text(), nullable=True),
        sa.Column("store_phone", sa.String(50), nullable=True),
        sa.Column("store_email", sa.String(255), nullable=True),
        sa.Column("store_logo", sa.Text(), nullable=True),
        sa.Column("pan_vat_number", sa.String(50), nullable=True),
        sa.Column("tax_rate", sa.Numeric(5, 2), nullable=False),
        sa.Column("enable_vat", sa.Boolean(), nullable=False),
        sa.Column("currency", sa.String(10), nullable=False),
        sa.Column("currency_symbol", sa.String(10), nullable=False),
        sa.Column("bill_prefix", sa.String(10), nullable=False),
        sa.Column("bill_start_number", sa.Integer(), nullable=False),
        sa.Column("bill_footer_message", sa.Text(), nullable=True),
        sa.Column("bank_name", sa.String(255), nullable=True),
        sa.Column("account_number", sa.String(100), nullable=True),
        sa.Column("account_name", sa.String(255), nullable=True),
        sa.Column("low_stock_threshold", sa.Integer(), nullable=False),
        sa.Column("allow_negative_stock", sa.Boolean(), nullable=False),
        sa.Column("default_user_role", sa.String(20), nullable=False),
        sa.Column("date_format", sa.String(20), nullable=False),
        sa.Column("timezone", sa.String(50), nullable=False),
    )
    op.create_index("ix_store_settings_id", "store_settings", ["id"], unique=False)

    # PRODUCTS
    op.create_table(
        "products",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("unit", sa.String(50), nullable=False),
        sa.Column("selling_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("cost_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock", sa.Integer(), nullable=False),
        sa.Column("min_stock", sa.Integer(), nullable=False),
        sa.Column("barcode", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_by", sa.String(255), nullable=True),
        sa.CheckConstraint("cost_price >= 0", name="ck_cost_price_non_negative"),
        sa.CheckConstraint("selling_price >= 0", name="ck_selling_price_non_negative"),
        sa.CheckConstraint("stock >= 0", name="ck_stock_non_negative"),
        sa.CheckConstraint("min_stock >= 0", name="ck_min_stock_non_negative"),
    )
    op.create_index("ix_products_id", "products", ["id"], unique=False)
    op.create_index("ix_products_category", "products", ["category"], unique=False)

    # BILLS
    op.create_table(
        "bills",
        sa.Column("bill_id", sa.Integer(), primary_key=True),
        sa.Column("bill_number", sa.String(50), nullable=False),
        sa.Column("customer_name", sa.String(255), nullable=False),
        sa.Column("customer_phone", sa.String(50), nullable=True),
        sa.Column("customer_address", sa.Text(), nullable=True),
        sa.Column("subtotal", sa.Numeric(10, 2), nullable=False),
        sa.Column("discount", sa.Numeric(10, 2), nullable=False),
        sa.Column("discount_type", sa.String(20), nullable=False),
        sa.Column("vat_rate", sa.Numeric(5, 2), nullable=False),
        sa.Column("vat_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("net_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("date_time", sa.DateTime(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("payment_method", sa.String(50), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("cashier_id", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("status IN ('paid', 'pending', 'cancelled')", name="ck_bill_status_valid"),
        sa.CheckConstraint("discount_type IN ('amount', 'percentage')", name="ck_bill_discount_type_valid"),
    )
    op.create_index("ix_bills_bill_id", "bills", ["bill_id"], unique=False)
    op.create_index("ix_bills_bill_number", "bills", ["bill_number"], unique=True)
    op.create_index("ix_bills_date_time", "bills", ["date_time"], unique=False)

    # BILL ITEMS
    op.create_table(
        "bill_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "bill_id",
            sa.Integer(),
            sa.ForeignKey("bills.bill_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("product_id", sa.String(32), nullable=True),
        sa.Column("product_name", sa.String(255), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_price", sa.Numeric(10, 2), nullable=False),
        sa.CheckConstraint("quantity > 0", name="ck_bill_item_quantity_positive"),
    )
    op.create_index("ix_bill_items_id", "bill_items", ["id"], unique=False)
    op.create_index("ix_bill_items_bill_id", "bill_items", ["bill_id"], unique=False)
    op.create_index("ix_bill_items_product_id", "bill_items", ["product_id"], unique=False)

    # SALES
    op.create_table(
        "sales",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("product_name", sa.String(255), nullable=False),
        sa.Column("invoice_number", sa.String(50), nullable=False),
        sa.Column("date_sold", sa.Date(), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("user", sa.String(255), nullable=True),
    )
    op.create_index("ix_sales_id", "sales", ["id"], unique=False)
    op.create_index("ix_sales_invoice_number", "sales", ["invoice_number"], unique=False)
    op.create_index("ix_sales_date_sold", "sales", ["date_sold"], unique=False)

    # EXPENSES
    op.create_table(
        "expenses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("payment_method", sa.String(50), nullable=False),
        sa.Column("vendor", sa.String(255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_recurring", sa.Boolean(), nullable=False),
        sa.Column("recurring_frequency", sa.String(20), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_by", sa.String(255), nullable=True),
        sa.CheckConstraint("amount >= 0", name="ck_expense_amount_non_negative"),
    )
    op.create_index("ix_expenses_id", "expenses", ["id"], unique=False)
    op.create_index("ix_expenses_category", "expenses", ["category"], unique=False)
    op.create_index("ix_expenses_date", "expenses", ["date"], unique=False)

    # EXPENSE CATEGORIES
    op.create_table(
        "expense_categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("color", sa.String(20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_expense_categories_id", "expense_categories", ["id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("expense_categories")
    op.drop_table("expenses")
    op.drop_table("sales")
    op.drop_table("bill_items")
    op.drop_table("bills")
    op.drop_table("products")
    op.drop_table("store_settings")
    op.drop_table("users")
