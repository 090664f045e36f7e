# =========================================================
# INVOICES ROUTER (DEPRECATED)
#
# Older surface over the same bill tables, keyed by "id"
# instead of "bill_id". Everything is delegated to the bill
# helpers so both surfaces behave identically. New clients
# should use /bills.
# =========================================================

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from meromart.database import get_db
from meromart.core.auth import get_optional_user
from meromart.core import billing
from meromart.schemas.bill import (
    BillCreate,
    BillStatus,
    InvoiceResponse,
    InvoiceUpdate,
)
from meromart.schemas.common import MessageResponse

router = APIRouter(prefix="/invoices", tags=["Invoices"], deprecated=True)


@router.get("", response_model=list[InvoiceResponse])
def list_invoices(
    bill_status: BillStatus | None = Query(None, alias="status"),
    search: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return billing.list_bills(db, bill_status, search)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_invoice(
    invoice_data: BillCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_optional_user),
):
    bill = billing.create_bill(
        db,
        invoice_data,
        current_user.name if current_user else None,
    )

    return {
        "message": "Bill created",
        "bill_id": bill.bill_id,
        "bill_number": bill.bill_number,
    }


@router.put("", response_model=MessageResponse)
@router.patch("", response_model=MessageResponse)
def update_invoice(
    invoice_data: InvoiceUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_optional_user),
):
    billing.update_bill(
        db,
        invoice_data.id,
        invoice_data,
        current_user.name if current_user else None,
    )
    return {"message": "Bill updated"}


@router.delete("", response_model=MessageResponse)
def delete_invoice(
    id: int | None = Query(None),
    db: Session = Depends(get_db),
):
    if id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing bill id",
        )

    billing.delete_bill(db, id)
    return {"message": "Bill deleted"}
