"""
Order to Cash API Endpoints
Order list with due-status colors, order edit and status changes

Author: Customer Connect Team
Date: 2025-11-06
"""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin
from app.dependencies import get_api_service
from app.domain.order import OrderStatusUpdate
from app.domain.pagination import extract_pagination
from app.domain.validation import validate_form
from app.services.screens import decorate_order, order_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["Order to Cash"])


@router.get("/")
async def get_orders(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by order or invoice number"),
    status: Optional[str] = Query(None, description="Filter by status"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """
    Get one page of the order-to-cash list

    Each row carries the due-status color and a human status label
    """
    result = await order_screen(api).list_page(page, search, {"status": status}, limit)
    return {"status": "success", **result}


@router.get("/stats")
async def get_order_stats(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await order_screen(api).stats()}


@router.get("/customer/{customer_name}")
async def get_orders_by_customer(
    customer_name: str,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_orders_by_customer(customer_name, {"page": page, "limit": limit})
    items, total_pages = extract_pagination(response, "sales", limit)
    return {
        "status": "success",
        "customer_name": customer_name,
        "items": [decorate_order(dict(item)) for item in items if isinstance(item, dict)],
        "total_pages": total_pages,
    }


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await order_screen(api).view(order_id)}


@router.post("/")
async def create_order(
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await order_screen(api).create(body)
    logger.info(f"Order {body.get('order_number')} created")
    return {"status": "success", "message": "Order created successfully", "data": data}


@router.put("/{order_id}")
async def update_order(
    order_id: str,
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await order_screen(api).update(order_id, body)
    return {"status": "success", "message": "Order updated successfully", "data": data}


@router.patch("/{order_id}/status")
async def update_order_status(
    order_id: str,
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    form = validate_form(OrderStatusUpdate, body)
    data = await api.update_order_status(order_id, form.status)
    logger.info(f"Order {order_id} moved to {form.status}")
    return {"status": "success", "data": data}


@router.delete("/{order_id}")
async def delete_order(
    order_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await order_screen(api).delete(order_id)
    return {"status": "success", "message": "Order deleted successfully"}
