"""
Product Registry Service Configuration.

Manages service settings via environment variables.
"""

import os
from typing import Any, List


class Settings:
    """
    Service settings.

    Values are read from the environment when the instance is created, so
    ``load_dotenv()`` must run first. Keyword arguments override the
    environment (used by tests).
    """

    def __init__(self, **overrides: Any) -> None:
        # Application settings
        self.APP_NAME: str = os.getenv("APP_NAME", "product-registry")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")

        # Security
        self.API_KEY: str = os.getenv("API_KEY", "")

        # Server settings
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "3000"))
        self.RELOAD: bool = os.getenv("RELOAD", "false").lower() == "true"
        self.WORKERS: int = int(os.getenv("WORKERS", "1"))
        self.CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

        # Pagination
        self.DEFAULT_PAGE_LIMIT: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "5"))

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self, name, value)

    @property
    def json_logs(self) -> bool:
        """Whether logs should be emitted as JSON."""
        return self.LOG_FORMAT.lower() == "json"

    def get_cors_origins(self) -> List[str]:
        """
        Get list of allowed CORS origins.

        Returns:
            List of origins, ``["*"]`` by default.
        """
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
