"""
Session guards for console routes
Reads the user stored at login and gates screens by user type and role permissions
"""
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, field_validator

from app.connectors.api_service import ApiService
from app.core.exceptions import AuthenticationRequired
from app.dependencies import get_api_service
from app.domain.permissions import has_view_permission, user_permissions, user_type


class SessionUser(BaseModel):
    """User data returned by the backend at login"""

    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    username: Optional[str] = None
    email_id: Optional[str] = None
    role: str = "customer"
    role_id: Optional[Any] = None
    customer_code: Optional[str] = None
    permissions: Optional[Dict[str, Any]] = None

    @field_validator("role", mode="before")
    @classmethod
    def _default_role(cls, value):
        return value or "customer"

    @field_validator("username", "email_id", "customer_code", mode="before")
    @classmethod
    def _as_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def session_user_from(user: Dict[str, Any]) -> SessionUser:
    data = dict(user or {})
    data["role"] = user_type(user)
    data["permissions"] = user_permissions(user)
    return SessionUser(**data)


async def get_session_user(api: ApiService = Depends(get_api_service)) -> SessionUser:
    """
    Dependency that returns the logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: SessionUser = Depends(get_session_user)):
            return {"message": f"Hello {user.username}"}
    """
    store = api.token_store
    if not store.token:
        raise AuthenticationRequired()

    if store.is_expired():
        store.clear()
        raise AuthenticationRequired("Session expired. Please login again.")

    return session_user_from(store.user or {})


def require_user_type(required_type: str):
    """
    Dependency factory restricting a screen to admins or customers.

    Usage:
        @router.delete("/users/{user_id}")
        async def delete_user(user_id: int, user: SessionUser = Depends(require_user_type("admin"))):
            pass
    """
    async def type_checker(user: SessionUser = Depends(get_session_user)) -> SessionUser:
        if user.role != required_type:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required user type: {required_type}, yours: {user.role}"
            )
        return user

    return type_checker


def require_permission(module: str):
    """
    Dependency factory for module-level access.

    Admins see every module; customers need the module's view permission
    in their role.
    """
    async def permission_checker(user: SessionUser = Depends(get_session_user)) -> SessionUser:
        if user.is_admin:
            return user
        if not has_view_permission(user.permissions, module):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Your role cannot view {module}"
            )
        return user

    return permission_checker


# Convenience dependencies
require_admin = require_user_type("admin")
require_customer = require_user_type("customer")
