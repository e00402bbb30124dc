"""
Product Form Model

Represents the product catalog entry as edited on the create/edit product
screens. Products are botanical raw materials described by origin, seasons
and sensory profile; the backend owns everything else (images, SAP links,
sales figures).

Author: Customer Connect Team
Date: 2025-11-03
"""
from typing import ClassVar, Dict, List, Literal, Optional

from pydantic import Field, field_validator

from app.domain.validation import ConsoleForm, split_list

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Image slots on the product screens
PRODUCT_IMAGE_FIELDS = ("product_image1", "product_image2", "product_image3", "product_image4")


class ProductForm(ConsoleForm):
    """
    Product form - what the console validates before create/update

    Fields:
        product_number: Catalog number (required, unique server-side)
        common_name / botanical_name: Display and Latin names
        plant_part: Part of the plant used (flower, leaf, root...)
        source_country: Country of origin
        harvest_region_new: Harvest regions (multi-select)

        # Seasons
        peak_season_enabled / peak_season_months
        harvest_season_enabled / harvest_season_months

        # Profile
        procurement_method, main_components, sensory_notes,
        color_absolute, extraction_process, applications_uses,
        production_availability

        status: active | inactive
    """

    REQUIRED: ClassVar[Dict[str, str]] = {
        "product_number": "Product Number is required",
    }

    product_number: str = Field(..., description="Catalog product number")
    common_name: Optional[str] = Field("", description="Common name")
    botanical_name: Optional[str] = Field("", description="Botanical (Latin) name")
    plant_part: Optional[str] = Field("", description="Plant part used")
    source_country: Optional[str] = Field("", description="Country of origin")
    harvest_region_new: List[str] = Field(default_factory=list, description="Harvest regions")

    peak_season_enabled: bool = False
    peak_season_months: List[str] = Field(default_factory=list)
    harvest_season_enabled: bool = False
    harvest_season_months: List[str] = Field(default_factory=list)

    procurement_method: Optional[str] = ""
    main_components: Optional[str] = ""
    sensory_notes: Optional[str] = ""
    color_absolute: Optional[str] = ""
    extraction_process: Optional[str] = ""
    applications_uses: Optional[str] = ""
    production_availability: Optional[str] = ""

    status: Literal["active", "inactive"] = "active"

    @field_validator(
        "harvest_region_new", "peak_season_months", "harvest_season_months", mode="before"
    )
    @classmethod
    def _split_lists(cls, value):
        return split_list(value)

    @field_validator("peak_season_months", "harvest_season_months")
    @classmethod
    def _known_months(cls, value: List[str]) -> List[str]:
        unknown = [month for month in value if month not in MONTHS]
        if unknown:
            raise ValueError(f"Unknown month: {', '.join(unknown)}")
        return value

    def to_payload(self) -> dict:
        data = super().to_payload()
        # Disabled seasons carry no months
        if not self.peak_season_enabled:
            data["peak_season_months"] = []
        if not self.harvest_season_enabled:
            data["harvest_season_months"] = []
        return data


class ProductStatusUpdate(ConsoleForm):
    """Quick activate/deactivate toggle on the product list"""

    REQUIRED: ClassVar[Dict[str, str]] = {"status": "Status is required"}

    status: Literal["active", "inactive"]
