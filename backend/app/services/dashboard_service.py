"""
Dashboard Service
Aggregates the admin and customer dashboard widgets

Widgets are independent: each one is fetched concurrently and a failing
widget renders empty instead of failing the page. Only an expired session
(AuthenticationRequired) aborts the dashboard.

Author: Customer Connect Team
Date: 2025-11-06
"""
import asyncio
import logging
from typing import Any, Awaitable, Dict, List, Optional

from app.connectors.api_service import ApiService
from app.core.exceptions import ApiError, AuthenticationRequired
from app.domain import display
from app.domain.pagination import extract_pagination

logger = logging.getLogger(__name__)

# card name -> (current key, previous key) inside the stats payload
GROWTH_CARDS = {
    "userStats": ("total", "previousTotal"),
    "productStats": ("total", "previousTotal"),
    "salesStats": ("revenue", "previousRevenue"),
    "invoiceStats": ("total", "previousTotal"),
}

WIDGET_LIMIT = 3
MAX_ACTIVITIES = 6


async def _widget(name: str, call: Awaitable[Any], default: Any = None) -> Any:
    try:
        return await call
    except AuthenticationRequired:
        raise
    except ApiError as e:
        logger.warning(f"Dashboard widget '{name}' unavailable: {e.message}")
        return default


def summarize_monthly(monthly: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Month-over-month view of the revenue series

    Returns each month with its growth rate (one decimal, None for the
    first month or after a zero-revenue month) plus the period totals.
    """
    months = []
    previous_revenue = None
    for entry in monthly or []:
        revenue = entry.get("revenue") or 0
        growth = None
        if previous_revenue:
            growth = round((revenue - previous_revenue) / previous_revenue * 100, 1)
        months.append({**entry, "revenue": revenue, "count": entry.get("count") or 0, "growth_rate": growth})
        previous_revenue = revenue

    total_revenue = sum(month["revenue"] for month in months)
    total_orders = sum(month["count"] for month in months)
    best = max(months, key=lambda month: month["revenue"], default=None)

    return {
        "months": months,
        "total_revenue": total_revenue,
        "total_revenue_display": display.format_currency(total_revenue, "INR"),
        "total_orders": total_orders,
        "average_order_value": round(total_revenue / max(total_orders, 1)),
        "average_order_value_display": display.format_currency(
            round(total_revenue / max(total_orders, 1)), "INR"
        ),
        "best_month": best.get("month") if best else None,
    }


class DashboardService:
    """Admin and customer dashboards"""

    def __init__(self, api: ApiService):
        self.api = api

    async def admin_dashboard(self) -> Dict[str, Any]:
        stats, activities = await asyncio.gather(
            _widget("stats", self.api.get_dashboard_stats(), {}),
            _widget("activities", self.api.get_recent_activities(), []),
        )
        stats = stats or {}

        growth = {}
        for card, (current_key, previous_key) in GROWTH_CARDS.items():
            values = stats.get(card) or {}
            growth[card] = display.growth_percentage(values.get(current_key), values.get(previous_key))

        if isinstance(activities, dict):
            activities = activities.get("activities") or activities.get("data") or []

        return {
            "stats": stats,
            "growth": growth,
            "monthly": summarize_monthly(stats.get("monthlyData") or []),
            "activities": [
                {**activity, "time_display": display.format_datetime(activity.get("created_at"))}
                for activity in (activities or [])[:MAX_ACTIVITIES]
                if isinstance(activity, dict)
            ],
        }

    async def system_health(self) -> Dict[str, Any]:
        health = await _widget("system health", self.api.get_system_health())
        if health is None:
            return {"status": "degraded", "backend": "unreachable"}
        return {"status": "healthy", "backend": health}

    async def customer_dashboard(self, customer_code: Optional[str]) -> Dict[str, Any]:
        """
        Customer landing page

        With a customer code, news and research are the customer's own
        meeting minutes and market reports; without one the general feeds
        are shown.
        """
        recent = {"limit": WIDGET_LIMIT, "sort": "created_date", "order": "desc"}

        if customer_code:
            news, research, order_stats, top_products = await asyncio.gather(
                _widget("meetings", self.api.get_customer_meetings(customer_code, recent), {}),
                _widget("market reports", self.api.get_customer_market_reports(customer_code, recent), {}),
                _widget("order stats", self.api.get_customer_order_stats(customer_code), {"success": False}),
                self.api.get_top_products(WIDGET_LIMIT),
            )
            news_items, _ = extract_pagination(news, "meetings")
            research_items, _ = extract_pagination(research, "reports")
        else:
            news, research, order_stats, top_products = await asyncio.gather(
                self.api.get_latest_news(WIDGET_LIMIT),
                self.api.get_latest_market_research(WIDGET_LIMIT),
                self.api.get_invoice_stats(),
                self.api.get_top_products(WIDGET_LIMIT),
            )
            news_items, _ = extract_pagination(news.get("data") if news.get("success") else {}, "news")
            research_items, _ = extract_pagination(
                research.get("data") if research.get("success") else {}, "research"
            )

        products = top_products.get("data") if top_products.get("success") else []
        if isinstance(products, dict):
            products = products.get("products") or []

        return {
            "customer_code": customer_code,
            "news": news_items[:WIDGET_LIMIT],
            "research": research_items[:WIDGET_LIMIT],
            "order_stats": order_stats,
            "top_products": (products or [])[:WIDGET_LIMIT],
        }
