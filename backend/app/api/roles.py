"""
Role Management API Endpoints
Roles carry the permission matrix that gates customer screens

Author: Customer Connect Team
Date: 2025-11-06
"""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin
from app.dependencies import get_api_service
from app.domain.permissions import DEFAULT_ACTIONS, DEFAULT_MODULES, empty_permissions
from app.services.screens import role_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roles", tags=["Roles"])


@router.get("/")
async def get_roles(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by role name"),
    status: Optional[str] = Query(None, description="Filter by status"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Roles with their granted/total permission counts"""
    result = await role_screen(api).list_page(page, search, {"status": status}, limit)
    return {"status": "success", **result}


@router.get("/active")
async def get_active_roles(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_active_roles()
    roles = response.get("data", response) if isinstance(response, dict) else response
    return {"status": "success", "data": roles or []}


@router.get("/template")
async def get_permission_template(user: SessionUser = Depends(require_admin)):
    """Blank permission matrix for the create-role screen"""
    return {
        "status": "success",
        "data": {
            "modules": DEFAULT_MODULES,
            "actions": DEFAULT_ACTIONS,
            "permissions": empty_permissions(),
        },
    }


@router.get("/{role_id}")
async def get_role(
    role_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Role detail including permission coverage"""
    return {"status": "success", "data": await role_screen(api).view(role_id)}


@router.post("/")
async def create_role(
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await role_screen(api).create(body)
    logger.info(f"Role {body.get('role_name')} created")
    return {"status": "success", "message": "Role created successfully", "data": data}


@router.put("/{role_id}")
async def update_role(
    role_id: str,
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await role_screen(api).update(role_id, body)
    return {"status": "success", "message": "Role updated successfully", "data": data}


@router.delete("/{role_id}")
async def delete_role(
    role_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await role_screen(api).delete(role_id)
    return {"status": "success", "message": "Role deleted successfully"}
