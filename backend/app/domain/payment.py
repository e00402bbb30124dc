"""
Payment and Invoice-to-Delivery Form Models

Author: Customer Connect Team
Date: 2025-11-04
"""
import datetime
from typing import ClassVar, Dict, Literal, Optional

from pydantic import Field, field_validator

from app.domain.validation import ConsoleForm, blank_to_none

PAYMENT_METHODS = ("bank_transfer", "cheque", "cash", "credit_card", "upi")


class PaymentForm(ConsoleForm):
    """Payment information entry"""

    REQUIRED: ClassVar[Dict[str, str]] = {
        "customer_name": "Customer Name is required",
        "invoice_number": "Invoice Number is required",
        "amount": "Amount is required",
        "date": "Date is required",
        "status": "Status is required",
    }

    customer_name: str
    invoice_number: str
    amount: float = Field(..., gt=0)
    date: datetime.date
    payment_method: Optional[str] = ""
    reference_number: Optional[str] = ""
    status: Literal["pending", "completed", "failed", "partial"] = "pending"
    notes: Optional[str] = ""


class InvoiceToDeliveryForm(ConsoleForm):
    """Invoice dispatch/delivery tracking record"""

    REQUIRED: ClassVar[Dict[str, str]] = {
        "invoice_number": "Invoice Number is required",
    }

    invoice_number: str
    customer_name: Optional[str] = ""
    invoice_value_inr: Optional[float] = Field(None, ge=0)
    lr_number: Optional[str] = ""
    dispatch_date: Optional[datetime.date] = None
    delivery_date: Optional[datetime.date] = None
    status: Literal["pending", "dispatched", "delivered"] = "pending"

    @field_validator("invoice_value_inr", "dispatch_date", "delivery_date", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        return blank_to_none(value)
