"""
User Form Models

Login credentials and the create/edit user form.

Author: Customer Connect Team
Date: 2025-11-03
"""
import random
import time
from typing import ClassVar, Dict, Literal, Optional, Union

from pydantic import AliasChoices, EmailStr, Field, ValidationInfo, field_validator

from app.domain.validation import ConsoleForm, blank_to_none

MIN_PASSWORD_LENGTH = 6


class LoginCredentials(ConsoleForm):
    """Login page form"""

    REQUIRED: ClassVar[Dict[str, str]] = {
        "username": "Username is required",
        "password": "Password is required",
    }

    username: str
    password: str


class UserForm(ConsoleForm):
    """
    Create/edit user form

    The password is mandatory when creating a user and optional when
    editing (blank keeps the current one). confirm_password is checked here
    and never sent to the backend.
    """

    REQUIRED: ClassVar[Dict[str, str]] = {
        "username": "Username is required",
        "email_id": "Email is required",
        "password": "Password is required",
    }
    LOCAL_ONLY: ClassVar[tuple] = ("confirm_password",)

    username: str
    email_id: EmailStr
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(
        None, validation_alias=AliasChoices("confirm_password", "confirmPassword")
    )
    first_name: Optional[str] = ""
    last_name: Optional[str] = ""
    phone: Optional[str] = ""
    customer_code: Optional[str] = ""
    role: Literal["admin", "customer"] = "customer"
    role_id: Optional[Union[int, str]] = None
    status: Literal["active", "inactive"] = "active"

    @classmethod
    def required_fields(cls, creating: bool = True) -> Dict[str, str]:
        fields = dict(cls.REQUIRED)
        if not creating:
            fields.pop("password")
        return fields

    @field_validator("password", "confirm_password", "role_id", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        return blank_to_none(value)

    @field_validator("password")
    @classmethod
    def _password_length(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
        return value

    @field_validator("confirm_password")
    @classmethod
    def _passwords_match(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        password = info.data.get("password")
        if password is not None and value != password:
            raise ValueError("Passwords do not match")
        return value

    def to_payload(self) -> dict:
        data = super().to_payload()
        if data.get("password") is None:
            data.pop("password", None)
        return data


def generate_customer_code(now: float = None) -> str:
    """CUST + last 6 digits of the millisecond clock + 2 random digits"""
    millis = int((now if now is not None else time.time()) * 1000)
    timestamp = str(millis)[-6:]
    suffix = f"{random.randint(0, 99):02d}"
    return f"CUST{timestamp}{suffix}"
