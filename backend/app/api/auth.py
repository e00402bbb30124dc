"""
Authentication API endpoints for the Customer Connect console
- Login / logout against the REST backend
- Current session user and sidebar menu
"""
import logging

from fastapi import APIRouter, Body, Depends

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, get_session_user, session_user_from
from app.core.exceptions import ApiError
from app.dependencies import get_api_service
from app.domain.permissions import menu_for_user
from app.domain.user import LoginCredentials
from app.domain.validation import validate_form

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

HOME_ROUTES = {"admin": "/admin/dashboard", "customer": "/dashboard"}


@router.post("/login")
async def login(
    credentials: dict = Body(...),
    api: ApiService = Depends(get_api_service)
):
    """
    Log in with username and password

    The backend's token is kept in the console session; the response tells
    the screen where to go next.
    """
    form = validate_form(LoginCredentials, credentials)
    response = await api.login(form.to_payload())

    if not api.token:
        raise ApiError("Invalid response format", status=502, response=response)

    user = session_user_from(api.token_store.user or {})
    logger.info(f"User {user.username} logged in as {user.role}")

    return {
        "status": "success",
        "user": user.model_dump(),
        "menu": menu_for_user(api.token_store.user or {}),
        "redirect": HOME_ROUTES.get(user.role, "/dashboard"),
    }


@router.post("/logout")
async def logout(api: ApiService = Depends(get_api_service)):
    await api.logout()
    return {"status": "success", "message": "Logged out"}


@router.get("/me")
async def get_me(user: SessionUser = Depends(get_session_user)):
    return {"status": "success", "data": user.model_dump()}


@router.get("/menu")
async def get_menu(
    user: SessionUser = Depends(get_session_user),
    api: ApiService = Depends(get_api_service)
):
    """Sidebar entries the current user may open"""
    return {
        "status": "success",
        "data": menu_for_user(api.token_store.user or {}),
    }


@router.get("/permissions")
async def get_my_permissions(
    user: SessionUser = Depends(get_session_user),
    api: ApiService = Depends(get_api_service)
):
    """Role permissions of the current user, straight from the backend"""
    permissions = await api.get_my_role_permissions()
    return {"status": "success", "data": permissions}
