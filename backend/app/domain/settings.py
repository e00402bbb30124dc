"""
Settings, SAP Material and News Form Models

Author: Customer Connect Team
Date: 2025-11-05
"""
import datetime
from typing import ClassVar, Dict, Literal, Optional

from pydantic import EmailStr, Field, field_validator

from app.domain.validation import ConsoleForm, blank_to_none

URL_HINT = "Please enter the full URL including https://"


def _require_full_url(value: str) -> str:
    if not value.startswith(("http://", "https://")):
        raise ValueError(URL_HINT)
    return value


class SocialMediaLinkForm(ConsoleForm):
    """Social media link shown on product pages"""

    REQUIRED: ClassVar[Dict[str, str]] = {
        "name": "Please fill in all fields",
        "icon": "Please fill in all fields",
        "link": "Please fill in all fields",
    }

    name: str
    icon: str
    link: str

    @field_validator("link")
    @classmethod
    def _full_url(cls, value: str) -> str:
        return _require_full_url(value)


class ExpertEmailForm(ConsoleForm):
    """Address product enquiries are routed to"""

    REQUIRED: ClassVar[Dict[str, str]] = {"email": "Email is required"}

    email: EmailStr


class SapMaterialForm(ConsoleForm):
    REQUIRED: ClassVar[Dict[str, str]] = {
        "sap_material_number": "SAP Material Number is required",
    }

    sap_material_number: str
    status: Literal["active", "inactive"] = "active"


class NewsForm(ConsoleForm):
    """
    News article

    content holds the company URL the article links to.
    """

    REQUIRED: ClassVar[Dict[str, str]] = {
        "title": "Title is required",
        "content": "Company Url is required",
        "status": "Status is required",
    }

    title: str
    content: str
    excerpt: Optional[str] = ""
    published_date: Optional[datetime.date] = None
    display_order: int = Field(0, ge=0)
    status: Literal["active", "inactive"] = "active"

    @field_validator("published_date", mode="before")
    @classmethod
    def _blank_date(cls, value):
        return blank_to_none(value)

    @field_validator("display_order", mode="before")
    @classmethod
    def _blank_order(cls, value):
        return 0 if blank_to_none(value) is None else value

    @field_validator("content")
    @classmethod
    def _full_url(cls, value: str) -> str:
        return _require_full_url(value)
