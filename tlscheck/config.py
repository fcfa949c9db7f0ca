"""TLS Check configuration."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

# Project root (parent of tlscheck/)
_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _ROOT / ".env"

DEFAULT_ALLOWED_DOMAINS: list[str] = [
    "user-1.snapfreak.com",
    "user-2.snapfreak.com",
    "user-3.snapfreak.com",
    "snapfreak.com",
]


class Settings(BaseSettings):
    """Application settings from env and .env file."""

    # API
    app_name: str = "TLS Check"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "info"
    log_json: bool = False

    # Allow-list. TLSCHECK_ALLOWED_DOMAINS takes a JSON list, e.g. '["a.com", "b.com"]'.
    # If allowlist_file is set it wins over allowed_domains (one domain per line).
    allowed_domains: list[str] = list(DEFAULT_ALLOWED_DOMAINS)
    allowlist_file: Path | None = None

    model_config = {
        "env_prefix": "TLSCHECK_",
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
