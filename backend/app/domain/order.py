"""
Order Form Models

Orders are created and tracked by the backend (order-to-cash). The console
edits header fields and moves orders through their status.

Author: Customer Connect Team
Date: 2025-11-04
"""
from datetime import date
from typing import ClassVar, Dict, Literal, Optional

from pydantic import Field, field_validator

from app.domain.validation import ConsoleForm, blank_to_none

ORDER_STATUSES = ("pending", "processing", "shipped", "delivered", "completed", "cancelled")

OrderStatus = Literal["pending", "processing", "shipped", "delivered", "completed", "cancelled"]


class OrderForm(ConsoleForm):
    """Create/edit order"""

    REQUIRED: ClassVar[Dict[str, str]] = {
        "customer_name": "Customer Name is required",
        "order_number": "Order Number is required",
    }

    customer_name: str
    order_number: str
    amount: Optional[float] = Field(None, ge=0)
    order_date: Optional[date] = None
    status: OrderStatus = "pending"
    notes: Optional[str] = ""

    @field_validator("amount", "order_date", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        return blank_to_none(value)


class OrderStatusUpdate(ConsoleForm):
    """Status change from the order view screen"""

    REQUIRED: ClassVar[Dict[str, str]] = {"status": "Status is required"}

    status: OrderStatus
