# =========================================================
# BILLING HELPERS
# Bill number allocation and atomic bill persistence, shared
# by the /bills and /invoices routers.
#
# A bill, its items and the derived sales rows are always
# written, replaced or removed together in one transaction.
# =========================================================

import logging
import re
from typing import Iterable

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from meromart.core.config import settings
from meromart.models.bills import Bill
from meromart.models.bill_items import BillItem
from meromart.models.products import Product
from meromart.models.sales import Sale
from meromart.models.store_settings import StoreSettings
from meromart.schemas.bill import BillCreate, BillItemCreate

logger = logging.getLogger(__name__)


# =========================================================
# BILL NUMBER ALLOCATION
# =========================================================
def allocate_bill_number(existing: Iterable[str], prefix: str, start: int) -> str:
    """
    Pick the smallest free bill number at or above ``start``.

    Stored numbers are matched on the full prefix, or on its leading
    letter with an optional dash, so both ``B-1000`` and ``B1000`` count
    as 1000. Numbers without a trailing digit run are ignored.
    """
    letter = prefix[:1]
    pattern = re.compile(rf"^(?:{re.escape(prefix)}|{re.escape(letter)}-?)(\d+)$")

    used = set()
    for bill_number in existing:
        if not bill_number:
            continue
        match = pattern.match(bill_number)
        if match:
            used.add(int(match.group(1)))

    candidate = start
    while candidate in used:
        candidate += 1

    return f"{prefix}{candidate}"


def get_bill_numbering(db: Session) -> tuple[str, int]:
    store = db.query(StoreSettings).order_by(StoreSettings.id).first()

    if store is not None and store.bill_prefix:
        start = store.bill_start_number
        if start is None:
            start = settings.BILL_START_NUMBER
        return store.bill_prefix, start

    return settings.BILL_PREFIX, settings.BILL_START_NUMBER


def next_bill_number(db: Session) -> str:
    prefix, start = get_bill_numbering(db)
    letter = prefix[:1]

    rows = (
        db.query(Bill.bill_number)
        .filter(Bill.bill_number.like(f"{letter}%"))
        .all()
    )

    return allocate_bill_number((row.bill_number for row in rows), prefix, start)


def bill_number_exists(db: Session, bill_number: str, exclude_bill_id: int | None = None) -> bool:
    query = db.query(Bill.bill_id).filter(Bill.bill_number == bill_number)
    if exclude_bill_id is not None:
        query = query.filter(Bill.bill_id != exclude_bill_id)
    return query.first() is not None


# =========================================================
# READS
# =========================================================
def list_bills(db: Session, bill_status: str | None = None, search: str | None = None):
    query = db.query(Bill).options(selectinload(Bill.items))

    if bill_status:
        query = query.filter(Bill.status == bill_status)

    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Bill.customer_name.ilike(pattern),
                Bill.bill_number.ilike(pattern),
            )
        )

    return query.order_by(Bill.date_time.desc(), Bill.bill_id.desc()).all()


def get_bill_or_404(db: Session, bill_id: int) -> Bill:
    bill = (
        db.query(Bill)
        .options(selectinload(Bill.items))
        .filter(Bill.bill_id == bill_id)
        .first()
    )

    if not bill:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Bill not found",
        )

    return bill


# =========================================================
# WRITES
# =========================================================
def _header_values(payload: BillCreate, cashier: str | None) -> dict:
    return {
        "customer_name": payload.customer_name,
        "customer_phone": payload.customer_phone,
        "customer_address": payload.customer_address,
        "subtotal": payload.subtotal,
        "discount": payload.discount,
        "discount_type": payload.discount_type,
        "vat_rate": payload.vat_rate,
        "vat_amount": payload.vat_amount,
        "net_amount": payload.net_amount,
        "date_time": payload.date_time,
        "status": payload.status,
        "payment_method": payload.payment_method,
        "notes": payload.notes,
        "cashier_id": cashier,
    }


def _product_category(db: Session, product_id: str | None) -> str | None:
    if not product_id:
        return None
    product = db.query(Product.category).filter(Product.id == product_id).first()
    return product.category if product else None


def _write_items(db: Session, bill: Bill, items: list[BillItemCreate], cashier: str | None):
    date_sold = bill.date_time.date()

    for item in items:
        line_total = item.line_total

        db.add(
            BillItem(
                bill_id=bill.bill_id,
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity,
                price=item.price,
                total_price=line_total,
            )
        )
        db.add(
            Sale(
                product_name=item.product_name,
                invoice_number=bill.bill_number,
                date_sold=date_sold,
                amount=line_total,
                category=_product_category(db, item.product_id),
                user=cashier,
            )
        )

    db.flush()


def _server_error(exc: SQLAlchemyError) -> HTTPException:
    reason = getattr(exc, "orig", None) or exc
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Server error: {reason}",
    )


def create_bill(db: Session, payload: BillCreate, cashier: str | None = None) -> Bill:
    cashier = payload.cashier_id or cashier
    requested = payload.bill_number
    max_attempts = max(1, settings.BILL_NUMBER_MAX_ATTEMPTS)

    for attempt in range(1, max_attempts + 1):
        if requested and not bill_number_exists(db, requested):
            bill_number = requested
        else:
            bill_number = next_bill_number(db)

        try:
            bill = Bill(bill_number=bill_number, **_header_values(payload, cashier))
            db.add(bill)
            db.flush()

            _write_items(db, bill, payload.items, cashier)
            db.commit()

        except IntegrityError as exc:
            db.rollback()

            # Another request took the number between allocation and insert
            if attempt < max_attempts and bill_number_exists(db, bill_number):
                logger.warning(
                    f"Bill number {bill_number} taken concurrently, "
                    f"retrying allocation (attempt {attempt}/{max_attempts})"
                )
                requested = None
                continue

            logger.error(f"Error creating bill: {exc}")
            raise _server_error(exc)

        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(f"Error creating bill: {exc}")
            raise _server_error(exc)

        logger.info(f"Bill {bill.bill_number} created with {len(payload.items)} items")
        db.refresh(bill)
        return bill


def update_bill(db: Session, bill_id: int, payload: BillCreate, cashier: str | None = None) -> Bill:
    bill = db.query(Bill).filter(Bill.bill_id == bill_id).first()

    if not bill:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Bill not found",
        )

    bill_number = payload.bill_number or bill.bill_number
    if bill_number != bill.bill_number and bill_number_exists(db, bill_number, exclude_bill_id=bill_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Bill number {bill_number} already exists",
        )

    cashier = payload.cashier_id or cashier or bill.cashier_id
    previous_number = bill.bill_number

    try:
        db.query(Sale).filter(
            Sale.invoice_number.in_({previous_number, bill_number})
        ).delete(synchronize_session=False)
        db.query(BillItem).filter(BillItem.bill_id == bill_id).delete(
            synchronize_session=False
        )

        bill.bill_number = bill_number
        for field, value in _header_values(payload, cashier).items():
            setattr(bill, field, value)
        db.flush()

        _write_items(db, bill, payload.items, cashier)
        db.commit()

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Error updating bill {bill_id}: {exc}")
        raise _server_error(exc)

    logger.info(f"Bill {bill_number} updated with {len(payload.items)} items")
    return get_bill_or_404(db, bill_id)


def delete_bill(db: Session, bill_id: int) -> None:
    bill = db.query(Bill).filter(Bill.bill_id == bill_id).first()

    if not bill:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Bill not found",
        )

    bill_number = bill.bill_number

    try:
        db.query(Sale).filter(Sale.invoice_number == bill_number).delete(
            synchronize_session=False
        )
        # bill_items go with the bill through ON DELETE CASCADE
        db.query(Bill).filter(Bill.bill_id == bill_id).delete(
            synchronize_session=False
        )
        db.commit()

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Error deleting bill {bill_id}: {exc}")
        raise _server_error(exc)

    logger.info(f"Bill {bill_number} deleted")
