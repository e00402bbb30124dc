"""
Invoice to Delivery API Endpoints
Dispatch and delivery tracking per invoice

Author: Customer Connect Team
Date: 2025-11-06
"""
import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin
from app.dependencies import get_api_service
from app.services.screens import invoice_to_delivery_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoice-to-delivery", tags=["Invoice to Delivery"])


@router.get("/")
async def get_invoices(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by invoice, customer or LR number"),
    status: Optional[str] = Query(None, description="Filter by status (pending/dispatched/delivered)"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Invoice list together with the statistics cards shown above it"""
    screen = invoice_to_delivery_screen(api)
    result, stats = await asyncio.gather(
        screen.list_page(page, search, {"status": status}, limit),
        screen.stats(),
    )
    return {"status": "success", "stats": stats, **result}


@router.get("/{invoice_id}")
async def get_invoice(
    invoice_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await invoice_to_delivery_screen(api).view(invoice_id)}


@router.post("/")
async def create_invoice(
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await invoice_to_delivery_screen(api).create(body)
    logger.info(f"Invoice {body.get('invoice_number')} added to delivery tracking")
    return {"status": "success", "message": "Invoice created successfully", "data": data}


@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await invoice_to_delivery_screen(api).update(invoice_id, body)
    return {"status": "success", "message": "Invoice updated successfully", "data": data}


@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await invoice_to_delivery_screen(api).delete(invoice_id)
    return {"status": "success", "message": "Invoice deleted successfully"}
