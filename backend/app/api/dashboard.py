"""
Dashboard API Endpoints
Admin overview and the customer landing page

Author: Customer Connect Team
Date: 2025-11-06
"""
from fastapi import APIRouter, Depends

from app.connectors.api_service import ApiService
from app.core.auth import SessionUser, require_admin, require_permission
from app.dependencies import get_api_service
from app.services.dashboard_service import DashboardService

router = APIRouter(tags=["Dashboard"])


@router.get("/admin/dashboard")
async def get_admin_dashboard(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    """
    Admin dashboard

    Returns:
    - Statistics cards with growth against the previous period
    - Monthly revenue with month-over-month growth and average order value
    - Recent activities
    """
    return {"status": "success", "data": await DashboardService(api).admin_dashboard()}


@router.get("/admin/system-health")
async def get_system_health(
    user: SessionUser = Depends(require_admin),
    api: ApiService = Depends(get_api_service)
):
    return {"status": "success", "data": await DashboardService(api).system_health()}


@router.get("/dashboard")
async def get_customer_dashboard(
    user: SessionUser = Depends(require_permission("dashboard")),
    api: ApiService = Depends(get_api_service)
):
    """Customer landing page: news, research, order stats and top products"""
    data = await DashboardService(api).customer_dashboard(user.customer_code)
    return {"status": "success", "data": data}
