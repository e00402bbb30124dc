"""
News API Endpoints
News items shown on the customer dashboard

Author: Customer Connect Team
Date: 2025-11-06
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.submission import read_submission
from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, get_session_user, require_admin
from app.dependencies import get_api_service
from app.services.screens import news_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/news", tags=["News"])


@router.get("/")
async def get_news(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by title"),
    status: Optional[str] = Query(None, description="Filter by status"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(get_session_user),
    api: ApiService = Depends(get_api_service)
):
    result = await news_screen(api).list_page(page, search, {"status": status}, limit)
    return {"status": "success", **result}


@router.get("/{news_id}")
async def get_news_item(
    news_id: str,
    user: SessionUser = Depends(get_session_user),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await news_screen(api).view(news_id)}


@router.post("/")
async def create_news(
    request: Request,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Create a news item; the optional cover image goes in the 'image' field"""
    payload, uploads = await read_submission(request)
    data = await news_screen(api).create_with_files(payload, uploads)
    logger.info(f"News '{payload.get('title')}' created")
    return {"status": "success", "message": "News created successfully", "data": data}


@router.put("/{news_id}")
async def update_news(
    news_id: str,
    request: Request,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    payload, uploads = await read_submission(request)
    data = await news_screen(api).update_with_files(news_id, payload, uploads)
    return {"status": "success", "message": "News updated successfully", "data": data}


@router.delete("/{news_id}")
async def delete_news(
    news_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await news_screen(api).delete(news_id)
    return {"status": "success", "message": "News deleted successfully"}
