# =========================================================
# BILLS ROUTER
#
# Canonical bill surface. Bill headers, their items and the
# derived sales rows are created, replaced and removed as one
# unit (see meromart.core.billing).
#
# Totals are stored exactly as submitted by the till.
# =========================================================

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from meromart.database import get_db
from meromart.core.auth import get_optional_user
from meromart.core import billing
from meromart.schemas.bill import (
    BillCreate,
    BillCreatedResponse,
    BillResponse,
    BillStatus,
    BillUpdate,
)
from meromart.schemas.common import MessageResponse

router = APIRouter(prefix="/bills", tags=["Bills"])


def _operator_name(current_user):
    return current_user.name if current_user else None


# =========================================================
# LIST BILLS
# =========================================================
@router.get("", response_model=list[BillResponse])
def list_bills(
    bill_status: BillStatus | None = Query(None, alias="status"),
    search: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return billing.list_bills(db, bill_status, search)


# =========================================================
# GET SINGLE BILL
# =========================================================
@router.get("/{bill_id}", response_model=BillResponse)
def get_bill(
    bill_id: int,
    db: Session = Depends(get_db),
):
    return billing.get_bill_or_404(db, bill_id)


# =========================================================
# CREATE BILL
# =========================================================
@router.post("", response_model=BillCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_bill(
    bill_data: BillCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_optional_user),
):
    bill = billing.create_bill(db, bill_data, _operator_name(current_user))

    return {
        "message": "Bill created",
        "bill_id": bill.bill_id,
        "bill_number": bill.bill_number,
    }


# =========================================================
# UPDATE BILL (FULL REPLACE OF ITEMS)
# =========================================================
@router.put("", response_model=MessageResponse)
@router.patch("", response_model=MessageResponse)
def update_bill(
    bill_data: BillUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(get_optional_user),
):
    billing.update_bill(db, bill_data.bill_id, bill_data, _operator_name(current_user))
    return {"message": "Bill updated"}


# =========================================================
# DELETE BILL
# =========================================================
@router.delete("", response_model=MessageResponse)
def delete_bill(
    bill_id: int | None = Query(None),
    db: Session = Depends(get_db),
):
    if bill_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing bill id",
        )

    billing.delete_bill(db, bill_id)
    return {"message": "Bill deleted"}
