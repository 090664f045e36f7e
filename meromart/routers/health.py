# meromart/routers/health.py

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meromart.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/")
def root():
    logger.info("Health check endpoint called")
    return {"message": "MeroMart API is running"}


@router.get("/health")
def health(db: Session = Depends(get_db)):
    response = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    try:
        db.execute(text("SELECT 1"))
        tables = set(inspect(db.get_bind()).get_table_names())
        response["database"] = "connected"
        response["bills_table"] = "exists" if "bills" in tables else "missing"
        response["bill_items_table"] = "exists" if "bill_items" in tables else "missing"
    except SQLAlchemyError as exc:
        logger.error(f"Health check database error: {exc}")
        response["database"] = "error"
        response["database_error"] = str(exc)

    return response
