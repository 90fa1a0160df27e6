import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class Settings:
    """Centralised application configuration sourced from environment variables."""

    def __init__(self) -> None:
        load_dotenv()
        self.database_path = Path(os.getenv("DATABASE_PATH", "data/users.db")).resolve()
        self.redis_url = os.getenv("REDIS_URL", "redis://localhost:6379/0")
        self.redis_max_connections = self._get_int("REDIS_MAX_CONNECTIONS", default=10, minimum=1)
        self.cache_ttl_seconds = self._get_int("CACHE_TTL_SECONDS", default=0, minimum=0)
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        origins = os.getenv("CORS_ALLOW_ORIGINS")
        if origins:
            self.cors_allow_origins = [item.strip() for item in origins.split(",") if item.strip()]
        else:
            self.cors_allow_origins = ["*"]

    @staticmethod
    def _get_int(key: str, default: Optional[int] = None, minimum: Optional[int] = None) -> int:
        value = os.getenv(key)
        if value is None:
            if default is None:
                raise RuntimeError(f"Missing required environment variable: {key}")
            return default
        try:
            number = int(value)
        except ValueError as exc:
            raise RuntimeError(f"Environment variable {key} must be an integer") from exc
        if minimum is not None and number < minimum:
            raise RuntimeError(f"Environment variable {key} must be at least {minimum}")
        return number
