"""
Settings API Endpoints
- Expert contact email shown to customers
- Social media links

Author: Customer Connect Team
Date: 2025-11-06
"""
import logging

from fastapi import APIRouter, Body, Depends

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin
from app.dependencies import get_api_service
from app.domain.settings import ExpertEmailForm
from app.domain.validation import validate_form
from app.services.screens import social_media_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


# =============================================================================
# Expert email
# =============================================================================

@router.get("/expert")
async def get_expert_settings(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await api.get_expert_settings()}


@router.put("/expert/email")
async def update_expert_email(
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    form = validate_form(ExpertEmailForm, body)
    data = await api.update_expert_email(form.to_payload())
    logger.info(f"Expert email changed by {user.username}")
    return {"status": "success", "message": "Expert email updated successfully", "data": data}


# =============================================================================
# Social media links
# =============================================================================

@router.get("/social-media")
async def get_social_media(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    result = await social_media_screen(api).list_page(1, "", None, 100)
    return {"status": "success", "data": result["items"]}


@router.post("/social-media")
async def create_social_media(
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await social_media_screen(api).create(body)
    return {"status": "success", "message": "Social media link added successfully", "data": data}


@router.put("/social-media/{link_id}")
async def update_social_media(
    link_id: str,
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await social_media_screen(api).update(link_id, body)
    return {"status": "success", "message": "Social media link updated successfully", "data": data}


@router.delete("/social-media/{link_id}")
async def delete_social_media(
    link_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await social_media_screen(api).delete(link_id)
    return {"status": "success", "message": "Social media link deleted successfully"}
