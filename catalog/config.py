# catalog/config.py
import os
from typing import List

# Settings are read from the environment once, at import time.


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    def __init__(self):
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./catalog.db")
        self.db_pool_size: int = int(os.getenv("DB_POOL_SIZE", 20))
        self.db_echo: bool = _env_bool("DB_ECHO")
        self.cors_origins: List[str] = _env_list(
            "CORS_ORIGINS", ["http://localhost:3000", "http://localhost:3001"]
        )
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", 4000))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
