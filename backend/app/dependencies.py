"""
Shared FastAPI dependencies
"""
from functools import lru_cache

from app.connectors.api_service import ApiService
from app.core.config import settings
from app.core.token_store import TokenStore


@lru_cache(maxsize=1)
def get_api_service() -> ApiService:
    """The console's single REST client (and with it, the single session)"""
    return ApiService(
        base_url=settings.API_BASE_URL,
        token_store=TokenStore(settings.TOKEN_STORE_PATH),
        timeout=settings.API_TIMEOUT,
    )
