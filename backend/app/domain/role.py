"""
Role Form Model

Author: Customer Connect Team
Date: 2025-11-03
"""
from typing import ClassVar, Dict, Literal, Optional

from pydantic import Field, field_validator

from app.domain.permissions import empty_permissions, permission_count, permission_coverage, total_permission_count
from app.domain.validation import ConsoleForm


class RoleForm(ConsoleForm):
    """Create/edit role form with its permission matrix"""

    REQUIRED: ClassVar[Dict[str, str]] = {
        "role_name": "Role Name is required",
    }

    role_name: str
    description: Optional[str] = ""
    status: Literal["active", "inactive"] = "active"
    permissions: Dict[str, Dict[str, bool]] = Field(default_factory=empty_permissions)

    @field_validator("permissions", mode="before")
    @classmethod
    def _fill_missing_modules(cls, value):
        # Modules the form did not send are revoked, not dropped
        merged = empty_permissions()
        for module, actions in (value or {}).items():
            if isinstance(actions, bool):
                actions = {"view": actions}
            merged[module] = {**merged.get(module, {}), **actions}
        return merged


def role_summary(role: dict) -> dict:
    """Permission counts shown on the role view screen"""
    permissions = role.get("permissions") or {}
    return {
        "granted": permission_count(permissions),
        "total": total_permission_count(permissions),
        "coverage": permission_coverage(permissions),
    }
