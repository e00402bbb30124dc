"""
Customer Portal API Endpoints
Read-only screens scoped to the logged-in customer's code

Every endpoint needs a customer session with a customer code, plus the
view permission of the module behind the screen.

Author: Customer Connect Team
Date: 2025-11-07
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_customer, require_permission
from app.core.config import settings
from app.dependencies import get_api_service
from app.domain.pagination import PageState, extract_pagination
from app.services.crud_view_service import unwrap_record
from app.services.screens import (
    decorate_invoice,
    decorate_market_research,
    decorate_meeting,
    decorate_order,
    decorate_payment,
)

router = APIRouter(prefix="/customer", tags=["Customer Portal"])


def customer_code_of(user: SessionUser) -> str:
    if not user.customer_code:
        raise HTTPException(status_code=403, detail="No customer code is linked to this account")
    return user.customer_code


def portal_access(module: str):
    """Customer session with the module's view permission"""
    async def checker(
        customer: SessionUser = Depends(require_customer),
        permitted: SessionUser = Depends(require_permission(module))
    ) -> SessionUser:
        return customer

    return checker


def _page(response, list_key: str, page: int, limit: int, decorate) -> dict:
    state = PageState(current_page=page, limit=limit)
    items, total_pages = extract_pagination(response, list_key, limit)
    state.update_total(total_pages)
    return {
        "status": "success",
        "items": [decorate(dict(item)) for item in items if isinstance(item, dict)],
        "pagination": state.to_dict(settings.MAX_VISIBLE_PAGES),
    }


def _record(response, decorate):
    record = unwrap_record(response)
    return decorate(dict(record)) if isinstance(record, dict) else record


@router.get("/profile")
async def get_profile(
    user: SessionUser = Depends(require_customer),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": unwrap_record(await api.get_customer_data(customer_code_of(user)))}


# =============================================================================
# Order to cash
# =============================================================================

@router.get("/order-stats")
async def get_order_stats(
    user: SessionUser = Depends(portal_access("orders")),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await api.get_customer_order_stats(customer_code_of(user))}


@router.get("/orders")
async def get_orders(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str = Query(""),
    user: SessionUser = Depends(portal_access("orders")),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_customer_orders(
        customer_code_of(user), {"page": page, "limit": limit, "search": search}
    )
    return _page(response, "orders", page, limit, decorate_order)


@router.get("/orders/{order_id}")
async def get_order(
    order_id: str,
    user: SessionUser = Depends(portal_access("orders")),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_customer_order(customer_code_of(user), order_id)
    return {"status": "success", "data": _record(response, decorate_order)}


@router.get("/invoice-to-delivery")
async def get_invoices(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str = Query(""),
    user: SessionUser = Depends(portal_access("orders")),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_customer_invoice_to_delivery(
        customer_code_of(user), {"page": page, "limit": limit, "search": search}
    )
    return _page(response, "invoices", page, limit, decorate_invoice)


# =============================================================================
# Meetings and market reports
# =============================================================================

@router.get("/meetings")
async def get_meetings(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str = Query(""),
    user: SessionUser = Depends(portal_access("meetings")),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_customer_meetings(
        customer_code_of(user), {"page": page, "limit": limit, "search": search}
    )
    return _page(response, "meetings", page, limit, decorate_meeting)


@router.get("/meetings/{meeting_id}")
async def get_meeting(
    meeting_id: str,
    user: SessionUser = Depends(portal_access("meetings")),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_customer_meeting(customer_code_of(user), meeting_id)
    return {"status": "success", "data": _record(response, decorate_meeting)}


@router.get("/market-reports")
async def get_market_reports(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str = Query(""),
    user: SessionUser = Depends(portal_access("market_reports")),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_customer_market_reports(
        customer_code_of(user), {"page": page, "limit": limit, "search": search}
    )
    return _page(response, "reports", page, limit, decorate_market_research)


@router.get("/market-reports/{report_id}")
async def get_market_report(
    report_id: str,
    user: SessionUser = Depends(portal_access("market_reports")),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_customer_market_report(customer_code_of(user), report_id)
    return {"status": "success", "data": _record(response, decorate_market_research)}


# =============================================================================
# Payments
# =============================================================================

@router.get("/payments")
async def get_payments(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str = Query(""),
    user: SessionUser = Depends(portal_access("payments")),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_customer_payments(
        customer_code_of(user), {"page": page, "limit": limit, "search": search}
    )
    return _page(response, "payments", page, limit, decorate_payment)


@router.get("/payments/{payment_id}")
async def get_payment(
    payment_id: str,
    user: SessionUser = Depends(portal_access("payments")),
    api: ApiService = Depends(get_api_service)
):
    response = await api.get_customer_payment(customer_code_of(user), payment_id)
    return {"status": "success", "data": _record(response, decorate_payment)}
