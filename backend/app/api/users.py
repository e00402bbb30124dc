"""
User Management API Endpoints
Admin screens for console users (admins and customer logins)

Author: Customer Connect Team
Date: 2025-11-06
"""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin
from app.dependencies import get_api_service
from app.domain.user import generate_customer_code
from app.services.screens import user_screen

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/")
async def get_users(
    page: int = Query(1, ge=1),
    search: Optional[str] = Query(None, description="Search by username, name or email"),
    role: Optional[str] = Query(None, description="Filter by role (admin/customer)"),
    status: Optional[str] = Query(None, description="Filter by status"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    result = await user_screen(api).list_page(page, search, {"role": role, "status": status}, limit)
    return {"status": "success", **result}


@router.get("/roles/active")
async def get_assignable_roles(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Active roles offered in the user form's role picker"""
    response = await api.get_active_roles()
    roles = response.get("data", response) if isinstance(response, dict) else response
    return {"status": "success", "data": roles or []}


@router.get("/customer-code")
async def suggest_customer_code(user: SessionUser = Depends(require_admin)):
    """Fresh customer code for the 'generate' button on the user form"""
    return {"status": "success", "data": generate_customer_code()}


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await user_screen(api).view(user_id)}


@router.post("/")
async def create_user(
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    data = await user_screen(api).create(body)
    logger.info(f"User {body.get('username')} created by {user.username}")
    return {"status": "success", "message": "User created successfully", "data": data}


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    body: dict = Body(...),
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """Update a user; leaving the password empty keeps the current one"""
    data = await user_screen(api).update(user_id, body)
    return {"status": "success", "message": "User updated successfully", "data": data}


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    await user_screen(api).delete(user_id)
    logger.info(f"User {user_id} deleted by {user.username}")
    return {"status": "success", "message": "User deleted successfully"}
