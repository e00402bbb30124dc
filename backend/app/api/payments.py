"""
Payment Information API Endpoints

Author: Customer Connect Team
Date: 2025-11-06
"""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin
from app.dependencies import get_api_service
from app.domain.payment import PAYMENT_METHODS
from app.services.screens import payment_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.get("/")
async def get_payments(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by customer or invoice number"),
    status: Optional[str] = Query(None, description="Filter by status"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    result = await payment_screen(api).list_page(page, search, {"status": status}, limit)
    return {"status": "success", "payment_methods": PAYMENT_METHODS, **result}


@router.get("/stats")
async def get_payment_stats(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await payment_screen(api).stats()}


@router.get("/{payment_id}")
async def get_payment(
    payment_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await payment_screen(api).view(payment_id)}


@router.post("/")
async def create_payment(
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await payment_screen(api).create(body)
    logger.info(f"Payment for invoice {body.get('invoice_number')} recorded")
    return {"status": "success", "message": "Payment created successfully", "data": data}


@router.put("/{payment_id}")
async def update_payment(
    payment_id: str,
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await payment_screen(api).update(payment_id, body)
    return {"status": "success", "message": "Payment updated successfully", "data": data}


@router.delete("/{payment_id}")
async def delete_payment(
    payment_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await payment_screen(api).delete(payment_id)
    return {"status": "success", "message": "Payment deleted successfully"}
