"""
Customer Connect Console - Backend API
Administrative console in front of the Customer Connect REST backend
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from app.api import (
    auth,
    customer,
    dashboard,
    invoice_to_delivery,
    market_research,
    meetings,
    news,
    orders,
    payments,
    products,
    roles,
    sap_materials,
    settings as settings_api,
    statements,
    users,
)
from app.connectors.api_service import ApiService
from app.core.config import settings
from app.core.exceptions import ApiError, AuthenticationRequired, FormValidationError
from app.core.logging_config import setup_logging
from app.dependencies import get_api_service
from app.services.dashboard_service import DashboardService

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

logger.info(f"Console backend: {settings.API_BASE_URL}")

# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Include API routers
for module in (
    auth,
    dashboard,
    products,
    users,
    roles,
    meetings,
    market_research,
    orders,
    payments,
    statements,
    invoice_to_delivery,
    sap_materials,
    settings_api,
    news,
    customer,
):
    app.include_router(module.router, prefix=API_PREFIX)


# =============================================================================
# Error banners
# =============================================================================

def wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


@app.exception_handler(FormValidationError)
async def form_validation_handler(request: Request, exc: FormValidationError):
    return JSONResponse(status_code=422, content=exc.to_dict())


@app.exception_handler(AuthenticationRequired)
async def authentication_required_handler(request: Request, exc: AuthenticationRequired):
    """Session is gone: browsers are sent to login, API callers get a 401"""
    if wants_html(request):
        return RedirectResponse(url=settings.LOGIN_ROUTE, status_code=303)
    return JSONResponse(
        status_code=401,
        content={"detail": exc.message, "redirect": settings.LOGIN_ROUTE},
    )


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status, content=exc.to_dict())


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return {
        "message": "Customer Connect Console",
        "status": "online",
        "version": settings.API_VERSION,
        "backend": settings.API_BASE_URL,
    }


@app.get("/health")
async def health(api: ApiService = Depends(get_api_service)):
    """Health check - probes the REST backend"""
    try:
        backend = await DashboardService(api).system_health()
    except AuthenticationRequired:
        backend = {"status": "healthy", "backend": "reachable (login required)"}

    return {
        "status": backend["status"],
        "service": "customer-connect-console",
        "version": settings.API_VERSION,
        "backend": backend["backend"],
    }
