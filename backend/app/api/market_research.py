"""
Market Research API Endpoints
Research reports with cover images and an attached document

Author: Customer Connect Team
Date: 2025-11-06
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.submission import read_submission
from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin, require_permission
from app.dependencies import get_api_service
from app.services.screens import market_research_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/market-research", tags=["Market Research"])


@router.get("/")
async def get_market_research(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by research number or name"),
    status: Optional[str] = Query(None, description="Filter by status"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_permission("market_reports")),
    api: ApiService = Depends(get_api_service)
):
    result = await market_research_screen(api).list_page(page, search, {"status": status}, limit)
    return {"status": "success", **result}


@router.get("/{research_id}")
async def get_research(
    research_id: str,
    user: SessionUser = Depends(require_permission("market_reports")),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await market_research_screen(api).view(research_id)}


@router.post("/")
async def create_research(
    request: Request,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """
    Create a research report

    Always sent to the backend as multipart: research_image1/2 accept
    JPEG, PNG, GIF or WebP; document accepts PDF, Word or Excel files.
    """
    payload, uploads = await read_submission(request)
    data = await market_research_screen(api).create_with_files(payload, uploads)
    logger.info(f"Market research {payload.get('research_number')} created")
    return {"status": "success", "message": "Market research created successfully", "data": data}


@router.put("/{research_id}")
async def update_research(
    research_id: str,
    request: Request,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    payload, uploads = await read_submission(request)
    data = await market_research_screen(api).update_with_files(research_id, payload, uploads)
    return {"status": "success", "message": "Market research updated successfully", "data": data}


@router.delete("/{research_id}")
async def delete_research(
    research_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await market_research_screen(api).delete(research_id)
    return {"status": "success", "message": "Market research deleted successfully"}
