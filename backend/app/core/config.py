"""
Centralized console configuration
"""
import json
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Console configuration"""

    # Console API
    API_TITLE: str = "Customer Connect Console"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Administrative console for the Customer Connect REST backend"

    # Upstream REST backend
    API_BASE_URL: str = "http://localhost:5000/api"
    API_TIMEOUT: float = 30.0

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    # Session
    LOGIN_ROUTE: str = "/"
    TOKEN_STORE_PATH: Optional[str] = None

    # Screens
    DEFAULT_PAGE_SIZE: int = 10
    MAX_VISIBLE_PAGES: int = 5
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    LOG_LEVEL: str = "INFO"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
