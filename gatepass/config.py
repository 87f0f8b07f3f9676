# gatepass/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Storage ───────────────────────────────────────────────────────────
    STORAGE_BACKEND: str = "json"               # json | sql
    DATABASE_FILE: str = "database.json"        # used by the json backend
    DATABASE_URL: str = "sqlite:///gatepass.db"  # used by the sql backend

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "0.0.0.0"
    BACKEND_PORT: int = 3000
    CORS_ORIGINS: list[str] = [
        "https://college-gate-pass.vercel.app",
        "http://localhost:3000",
    ]

    # ── Pass lifecycle ────────────────────────────────────────────────────
    STRICT_TRANSITIONS: bool = False   # refuse re-decide / double exit / double entry

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True           # rotating gatepass.log in LOG_DIR

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
