"""
Statements API Endpoints
Read-only customer account statements

Author: Customer Connect Team
Date: 2025-11-06
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin
from app.dependencies import get_api_service
from app.domain.pagination import extract_pagination
from app.services.screens import decorate_statement, statement_screen

router = APIRouter(prefix="/statements", tags=["Statements"])


@router.get("/")
async def get_statements(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by customer"),
    status: Optional[str] = Query(None, description="Filter by status"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    result = await statement_screen(api).list_page(page, search, {"status": status}, limit)
    return {"status": "success", **result}


@router.get("/summary")
async def get_statement_summary(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await api.get_statement_summary()}


@router.get("/customer/{customer_code}")
async def get_statements_by_customer(
    customer_code: str,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_statements_by_customer(customer_code, {"page": page, "limit": limit})
    items, total_pages = extract_pagination(response, "statements", limit)
    return {
        "status": "success",
        "customer_code": customer_code,
        "items": [decorate_statement(dict(item)) for item in items if isinstance(item, dict)],
        "total_pages": total_pages,
    }


@router.get("/{statement_id}")
async def get_statement(
    statement_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await statement_screen(api).view(statement_id)}
