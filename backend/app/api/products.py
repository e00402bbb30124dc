"""
Products API Endpoints
Product catalog screens: list, view, create/edit with images, status toggle

Author: Customer Connect Team
Date: 2025-11-06
"""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Request

from app.api.submission import read_submission
from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin, require_permission
from app.dependencies import get_api_service
from app.domain.product import ProductStatusUpdate
from app.domain.validation import validate_form
from app.services.screens import product_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("/")
async def get_products(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by number or name"),
    status: Optional[str] = Query(None, description="Filter by status (active/inactive)"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_permission("products")),
    api: ApiService = Depends(get_api_service)
):
    """
    Get one page of the product catalog

    Returns products with display fields plus pagination controls
    """
    result = await product_screen(api).list_page(page, search, {"status": status}, limit)
    return {"status": "success", **result}


@router.get("/top")
async def get_top_products(
    limit: int = Query(3, ge=1, le=50),
    user: SessionUser = Depends(require_permission("products")),
    api: ApiService = Depends(get_api_service)
):
    """Best-selling products; an unavailable ranking yields an empty list"""
    customer_code = None if user.is_admin else user.customer_code
    result = await api.get_top_products(limit, customer_code)
    if not result.get("success"):
        return {"status": "success", "data": [], "error": result.get("error")}
    return {"status": "success", "data": result.get("data") or []}


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    user: SessionUser = Depends(require_permission("products")),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await product_screen(api).view(product_id)}


@router.post("/")
async def create_product(
    request: Request,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """
    Create a product

    Accepts a JSON body, or a multipart form when images are attached
    (product_image1..product_image4, JPEG/PNG up to 5MB each).
    """
    payload, uploads = await read_submission(request)
    screen = product_screen(api)
    if uploads:
        data = await screen.create_with_files(payload, uploads)
    else:
        data = await screen.create(payload)

    logger.info(f"Product {payload.get('product_number')} created")
    return {"status": "success", "message": "Product created successfully", "data": data}


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    request: Request,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    payload, uploads = await read_submission(request)
    screen = product_screen(api)
    if uploads:
        data = await screen.update_with_files(product_id, payload, uploads)
    else:
        data = await screen.update(product_id, payload)
    return {"status": "success", "message": "Product updated successfully", "data": data}


@router.patch("/{product_id}/status")
async def update_product_status(
    product_id: str,
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Activate or deactivate a product from the list"""
    form = validate_form(ProductStatusUpdate, body)
    data = await api.products.update(product_id, form.to_payload())
    return {"status": "success", "data": data}


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await product_screen(api).delete(product_id)
    logger.info(f"Product {product_id} deleted")
    return {"status": "success", "message": "Product deleted successfully"}
