"""
Market Research Form Model

Author: Customer Connect Team
Date: 2025-11-04
"""
from typing import ClassVar, Dict, Literal, Optional

from pydantic import Field

from app.domain.validation import ConsoleForm

# Upload slots: two images and one document
RESEARCH_IMAGE_FIELDS = ("research_image1", "research_image2")
RESEARCH_DOCUMENT_FIELD = "document"


class MarketResearchForm(ConsoleForm):
    """Create/edit market research report"""

    REQUIRED: ClassVar[Dict[str, str]] = {
        "research_number": "Research Number is required",
        "research_name": "Research Name is required",
    }

    research_number: str
    research_name: str
    research_title: Optional[str] = ""
    research_short_description: Optional[str] = ""
    research_long_description: Optional[str] = ""
    video_link: Optional[str] = ""
    priority: int = Field(0, ge=0)
    status: Literal["active", "inactive"] = "active"
