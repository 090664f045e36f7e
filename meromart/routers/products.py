# meromart/routers/products.py

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meromart.database import get_db
from meromart.core.auth import get_optional_user
from meromart.models.products import Product
from meromart.schemas.product import ProductSave, ProductResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["Products"],
)


@router.get("", response_model=list[ProductResponse])
def list_products(
    db: Session = Depends(get_db),
):
    return (
        db.query(Product)
        .order_by(Product.created_at.desc(), Product.name)
        .all()
    )


@router.post("")
def save_product(
    product_data: ProductSave,
    db: Session = Depends(get_db),
    current_user=Depends(get_optional_user),
):
    actor = current_user.name if current_user else None
    values = product_data.model_dump(exclude={"id"})

    if product_data.id:
        product = db.query(Product).filter(Product.id == product_data.id).first()

        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )

        for field, value in values.items():
            setattr(product, field, value)
        product.updated_at = datetime.now(timezone.utc)
        product.updated_by = actor

        try:
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(f"Product update failed: {exc}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Database update failed: {exc}",
            )

        return {"message": "Product updated", "id": product.id}

    product = Product(
        id=uuid.uuid4().hex,
        created_by=actor,
        **values,
    )

    try:
        db.add(product)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Product insert failed: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database insert failed: {exc}",
        )

    return {"message": "Product added", "id": product.id}


@router.delete("")
def delete_product(
    id: str | None = Query(None),
    db: Session = Depends(get_db),
):
    if not id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing id parameter",
        )

    product = db.query(Product).filter(Product.id == id).first()

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    db.delete(product)
    db.commit()

    return {"message": "Product deleted"}
