"""
Meeting Minutes API Endpoints
Minutes of meeting (MoM) with attendees, action items and attachments

Author: Customer Connect Team
Date: 2025-11-06
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.submission import read_submission
from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin
from app.dependencies import get_api_service
from app.services.screens import meeting_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meetings", tags=["Meeting Minutes"])


@router.get("/")
async def get_meetings(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by MoM number or title"),
    status: Optional[str] = Query(None, description="Filter by status"),
    customer_code: Optional[str] = Query(None, description="Filter by customer"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    filters = {"status": status, "customer_code": customer_code}
    result = await meeting_screen(api).list_page(page, search, filters, limit)
    return {"status": "success", **result}


@router.get("/stats")
async def get_meeting_stats(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Statistics cards; null when the backend cannot provide them"""
    return {"status": "success", "data": await meeting_screen(api).stats()}


@router.get("/customer-codes")
async def get_customer_codes(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Customer codes offered in the meeting form"""
    response = await api.get_customer_codes()
    codes = response.get("data", response) if isinstance(response, dict) else response
    return {"status": "success", "data": codes or []}


@router.get("/{meeting_id}")
async def get_meeting(
    meeting_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await meeting_screen(api).view(meeting_id)}


@router.post("/")
async def create_meeting(
    request: Request,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Create minutes; attachments make the submission multipart"""
    payload, uploads = await read_submission(request)
    screen = meeting_screen(api)
    if uploads:
        data = await screen.create_with_files(payload, uploads)
    else:
        data = await screen.create(payload)

    logger.info(f"Meeting minutes {payload.get('mom_number')} created")
    return {"status": "success", "message": "Meeting minutes created successfully", "data": data}


@router.put("/{meeting_id}")
async def update_meeting(
    meeting_id: str,
    request: Request,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    payload, uploads = await read_submission(request)
    screen = meeting_screen(api)
    if uploads:
        data = await screen.update_with_files(meeting_id, payload, uploads)
    else:
        data = await screen.update(meeting_id, payload)
    return {"status": "success", "message": "Meeting minutes updated successfully", "data": data}


@router.delete("/{meeting_id}")
async def delete_meeting(
    meeting_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await meeting_screen(api).delete(meeting_id)
    return {"status": "success", "message": "Meeting minutes deleted successfully"}
