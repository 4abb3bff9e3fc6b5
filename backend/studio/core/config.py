"""Application configuration utilities."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    TZ: str = "Asia/Kolkata"
    STORE_BACKEND: str = "memory"
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    STORE_TIMEOUT: float = 10.0


@lru_cache
def get_settings() -> Settings:
    return Settings(
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        TZ=os.getenv("STUDIO_TZ", "Asia/Kolkata"),
        STORE_BACKEND=os.getenv("STORE_BACKEND", "memory").strip().lower(),
        SUPABASE_URL=os.getenv("SUPABASE_URL", "").rstrip("/"),
        SUPABASE_KEY=os.getenv("SUPABASE_KEY", ""),
        STORE_TIMEOUT=float(os.getenv("STORE_TIMEOUT", "10")),
    )


settings = get_settings()
