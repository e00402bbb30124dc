"""
Screen configuration

Builds the CrudViewService behind each management screen and the row
decorators that add display-only values (formatted money and dates,
status colors, badge labels).

Author: Customer Connect Team
Date: 2025-11-05
"""
from typing import Any, Dict

from app.connectors.api_service import ApiService
from app.domain import display
from app.domain.market_research import MarketResearchForm, RESEARCH_DOCUMENT_FIELD, RESEARCH_IMAGE_FIELDS
from app.domain.meeting import MeetingForm
from app.domain.order import OrderForm
from app.domain.payment import InvoiceToDeliveryForm, PaymentForm
from app.domain.product import PRODUCT_IMAGE_FIELDS, ProductForm
from app.domain.role import RoleForm, role_summary
from app.domain.settings import NewsForm, SapMaterialForm, SocialMediaLinkForm
from app.domain.user import UserForm
from app.services.crud_view_service import CrudViewService

Row = Dict[str, Any]


# =============================================================================
# Row decorators
# =============================================================================

def decorate_product(row: Row) -> Row:
    row["display_name"] = row.get("common_name") or row.get("product_number") or ""
    row["is_active"] = row.get("status") == "active"
    return row


def decorate_user(row: Row) -> Row:
    full_name = f"{row.get('first_name') or ''} {row.get('last_name') or ''}".strip()
    row["full_name"] = full_name or row.get("username") or ""
    row["created_display"] = display.format_date(row.get("created_at"))
    return row


def decorate_role(row: Row) -> Row:
    row["permission_summary"] = role_summary(row)
    return row


def decorate_meeting(row: Row) -> Row:
    row["meeting_date_display"] = display.format_date(row.get("meeting_date"))
    row["next_meeting_date_display"] = display.format_date(row.get("next_meeting_date"))
    row["attendee_count"] = len(row.get("attendees") or [])
    row["action_item_count"] = len(row.get("action_items") or [])
    attachments = row.get("attachments") or []
    for attachment in attachments:
        if isinstance(attachment, dict):
            attachment["size_display"] = display.format_file_size(attachment.get("size"))
    return row


def decorate_market_research(row: Row) -> Row:
    row["created_display"] = display.format_date(row.get("created_date") or row.get("created_at"))
    return row


def decorate_order(row: Row) -> Row:
    """Order-to-cash rows use the ERP's capitalised column names"""
    status = row.get("Status", row.get("status"))
    amount = row.get("Amount", row.get("amount"))
    row["amount_display"] = display.format_currency(amount, "INR")
    row["status_color"] = display.order_due_status_color(status)
    row["status_text"] = status.strip() if isinstance(status, str) else status
    row["status_label"] = display.order_status_label(row.get("order_status") or row.get("status"))
    return row


def decorate_payment(row: Row) -> Row:
    row["amount_display"] = display.format_currency(row.get("amount"), "USD")
    row["status_color"] = display.payment_status_color(row.get("status"))
    row["date_display"] = display.format_date(row.get("date"))
    return row


def decorate_statement(row: Row) -> Row:
    row["outstanding_display"] = display.format_currency(row.get("outstanding_value"), "USD")
    row["paid_display"] = display.format_currency(row.get("total_paid_amount"), "USD")
    row["status_color"] = display.statement_status_color(row.get("status"))
    row["date_display"] = display.format_date(row.get("statement_date") or row.get("created_at"))
    return row


def decorate_invoice(row: Row) -> Row:
    row["invoice_value_display"] = display.format_currency(
        row.get("invoice_value_inr"), "INR", blank_as_dash=True
    )
    row["status_color"] = display.invoice_delivery_status_color(row.get("status"))
    row["invoice_date_display"] = display.format_date(row.get("invoice_date"))
    row["dispatch_date_display"] = display.format_date(row.get("dispatch_date"))
    row["delivery_date_display"] = display.format_date(row.get("delivery_date"))
    return row


def decorate_news(row: Row) -> Row:
    row["published_display"] = display.format_date(row.get("published_date"))
    return row


# =============================================================================
# Screens
# =============================================================================

def product_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(
        api.products,
        ProductForm,
        "products",
        decorate_product,
        upload_kinds={field: "product_image" for field in PRODUCT_IMAGE_FIELDS},
        default_upload_kind="product_image",
    )


def user_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(api.users, UserForm, "users", decorate_user)


def role_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(api.roles, RoleForm, "roles", decorate_role)


def meeting_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(api.meetings, MeetingForm, "meetings", decorate_meeting)


def market_research_screen(api: ApiService) -> CrudViewService:
    kinds = {field: "research_image" for field in RESEARCH_IMAGE_FIELDS}
    kinds[RESEARCH_DOCUMENT_FIELD] = "document"
    return CrudViewService(
        api.market_research,
        MarketResearchForm,
        "research",
        decorate_market_research,
        upload_kinds=kinds,
    )


def order_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(api.orders, OrderForm, "sales", decorate_order)


def payment_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(api.payments, PaymentForm, "payments", decorate_payment)


def statement_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(api.statements, None, "statements", decorate_statement)


def invoice_to_delivery_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(api.invoice_to_delivery, InvoiceToDeliveryForm, "invoices", decorate_invoice)


def sap_material_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(api.sap_materials, SapMaterialForm, "sapMaterials")


def social_media_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(api.social_media, SocialMediaLinkForm, "socialMedia")


def news_screen(api: ApiService) -> CrudViewService:
    return CrudViewService(
        api.news,
        NewsForm,
        "news",
        decorate_news,
        upload_kinds={"image": "news_image"},
        default_upload_kind="news_image",
    )
