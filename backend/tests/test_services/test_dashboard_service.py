"""
Unit tests for DashboardService

Author: Customer Connect Team
Date: 2025-11-07
"""
import asyncio

import pytest

from app.core.exceptions import AuthenticationRequired
from app.services.dashboard_service import DashboardService, summarize_monthly


class TestSummarizeMonthly:

    def test_growth_and_totals(self):
        # Arrange
        monthly = [
            {"month": "Jan", "revenue": 100000, "count": 4},
            {"month": "Feb", "revenue": 150000, "count": 6},
            {"month": "Mar", "revenue": 120000, "count": 5},
        ]

        # Act
        summary = summarize_monthly(monthly)

        # Assert
        assert [m["growth_rate"] for m in summary["months"]] == [None, 50.0, -20.0]
        assert summary["total_revenue"] == 370000
        assert summary["total_orders"] == 15
        assert summary["average_order_value"] == 24667
        assert summary["average_order_value_display"] == "₹24,667.00"
        assert summary["best_month"] == "Feb"

    def test_empty_series(self):
        summary = summarize_monthly([])

        assert summary["months"] == []
        assert summary["average_order_value"] == 0
        assert summary["best_month"] is None


class TestAdminDashboard:

    def test_stats_growth_and_activities(self, api_service, backend):
        # Arrange
        backend.add("GET", "/admin/dashboard/stats", {
            "userStats": {"total": 120, "previousTotal": 100},
            "salesStats": {"revenue": 90, "previousRevenue": 120},
            "monthlyData": [{"month": "Jan", "revenue": 10, "count": 1}],
        })
        backend.add("GET", "/admin/dashboard/activities", {"activities": [
            {"message": f"event {i}", "created_at": "2025-03-05T09:05:00"} for i in range(8)
        ]})

        # Act
        dashboard = asyncio.run(DashboardService(api_service).admin_dashboard())

        # Assert
        assert dashboard["growth"]["userStats"] == 20
        assert dashboard["growth"]["salesStats"] == -25
        assert dashboard["growth"]["productStats"] == 0
        assert dashboard["monthly"]["total_revenue"] == 10
        assert len(dashboard["activities"]) == 6
        assert dashboard["activities"][0]["time_display"] == "Mar 5, 2025, 09:05 AM"

    def test_failed_widgets_render_empty(self, api_service, backend):
        """Test an unavailable backend degrades the page instead of failing it"""
        backend.add("GET", "/admin/dashboard/stats", {"message": "boom"}, status=500)
        backend.add("GET", "/admin/dashboard/activities", {"message": "boom"}, status=500)

        dashboard = asyncio.run(DashboardService(api_service).admin_dashboard())

        assert dashboard["stats"] == {}
        assert dashboard["activities"] == []
        assert dashboard["monthly"]["months"] == []

    def test_system_health(self, api_service, backend):
        backend.add("GET", "/admin/system/health", {"database": "ok"})

        assert asyncio.run(DashboardService(api_service).system_health()) == {
            "status": "healthy",
            "backend": {"database": "ok"},
        }

    def test_system_health_degraded(self, api_service, backend):
        backend.add("GET", "/admin/system/health", {}, status=503)

        health = asyncio.run(DashboardService(api_service).system_health())

        assert health["status"] == "degraded"


class TestCustomerDashboard:

    def test_customer_specific_widgets(self, api_service, backend):
        # Arrange
        backend.add("GET", "/customer/CUST1/meetings", {"data": {"meetings": [{"id": i} for i in range(5)]}})
        backend.add("GET", "/customer/CUST1/market-reports", {"data": {"reports": [{"id": 1}]}})
        backend.add("GET", "/customer/CUST1/order-stats", {"total": 3})
        backend.add("GET", "/products/top/by-sales", {"data": [{"product_number": "P-1"}]})

        # Act
        dashboard = asyncio.run(DashboardService(api_service).customer_dashboard("CUST1"))

        # Assert
        assert [item["id"] for item in dashboard["news"]] == [0, 1, 2]
        assert dashboard["research"] == [{"id": 1}]
        assert dashboard["order_stats"] == {"total": 3}
        assert dashboard["top_products"] == [{"product_number": "P-1"}]

    def test_general_feeds_without_customer_code(self, api_service, backend):
        backend.add("GET", "/news", {"data": {"news": [{"title": "Harvest update"}]}})
        backend.add("GET", "/market-research", {"message": "boom"}, status=500)
        backend.add("GET", "/orders/stats", {"total": 10})
        backend.add("GET", "/products/top/by-sales", {"data": {"products": [{"id": 1}]}})

        dashboard = asyncio.run(DashboardService(api_service).customer_dashboard(None))

        assert dashboard["news"] == [{"title": "Harvest update"}]
        assert dashboard["research"] == []
        assert dashboard["order_stats"]["total"] == 10
        assert dashboard["top_products"] == [{"id": 1}]

    def test_expired_session_aborts_dashboard(self, api_service, backend, customer_session):
        backend.add("GET", "/news", {}, status=401)
        backend.add("GET", "/market-research", {"research": []})
        backend.add("GET", "/orders/stats", {})
        backend.add("GET", "/products/top/by-sales", {"data": []})

        with pytest.raises(AuthenticationRequired):
            asyncio.run(DashboardService(api_service).customer_dashboard(None))
