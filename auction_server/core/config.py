# auction_server/core/config.py
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

PROJECT_ROOT_DIR = Path(__file__).resolve().parents[2]

# Fallbacks used when the environment does not provide a value.
DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./auction_experiment.db"
DEFAULT_ADMIN_USER = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    database_url: str = DEFAULT_DATABASE_URL
    database_echo: bool = False

    admin_user: str = DEFAULT_ADMIN_USER
    admin_password: str = DEFAULT_ADMIN_PASSWORD

    allowed_origins: List[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    app_host: str = "127.0.0.1"
    app_port: int = 8000
    reload_app: bool = False


def load_settings(env_file: Path | None = None) -> Settings:
    """
    Reads the settings from the environment.

    A ``.env`` file in the project root is loaded first if it exists; values
    already present in the process environment take precedence over it.
    """
    dotenv_path = env_file or PROJECT_ROOT_DIR / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path)

    origins = [
        origin.strip()
        for origin in os.getenv("BACKEND_ALLOWED_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    return Settings(
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        database_echo=_as_bool(os.getenv("DATABASE_ECHO", "false")),
        admin_user=os.getenv("ADMIN_USER") or DEFAULT_ADMIN_USER,
        admin_password=os.getenv("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD,
        allowed_origins=origins or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        app_host=os.getenv("APP_HOST", "127.0.0.1"),
        app_port=int(os.getenv("APP_PORT", "8000")),
        reload_app=_as_bool(os.getenv("RELOAD_APP", "false")),
    )
