"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

from app.core.catalog.client import TMDB_API_BASE_URL
from app.core.recommendation.generative import (
    DEFAULT_HUGGINGFACE_MODEL,
    DEFAULT_OPENAI_MODEL,
    HUGGINGFACE_API_URL,
)

DEV_JWT_SECRET = "screenscout-dev-secret-change-me"


def get_database_path() -> str:
    """Get database file path from env or default."""
    return os.getenv("DATABASE_URL", "sqlite:///").replace("sqlite:///", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "screenscout.db"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_tmdb_api_key() -> str:
    return os.getenv("TMDB_API_KEY", "")


def get_tmdb_base_url() -> str:
    return os.getenv("TMDB_API_BASE_URL", TMDB_API_BASE_URL)


def get_catalog_timeout() -> float:
    """Per-call catalog timeout in seconds."""
    return float(os.getenv("CATALOG_TIMEOUT_SECONDS", "10"))


def get_openai_api_key() -> str:
    return os.getenv("OPENAI_API_KEY", "")


def get_openai_model() -> str:
    return os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)


def get_huggingface_api_key() -> str:
    return os.getenv("HUGGINGFACE_API_KEY", "")


def get_huggingface_model() -> str:
    return os.getenv("HUGGINGFACE_MODEL", DEFAULT_HUGGINGFACE_MODEL)


def get_huggingface_api_url() -> str:
    return os.getenv("HUGGINGFACE_API_URL", HUGGINGFACE_API_URL)


def get_inference_timeout() -> float:
    """Timeout for one inference service call, in seconds."""
    return float(os.getenv("INFERENCE_TIMEOUT_SECONDS", "30"))


def get_jwt_secret() -> str:
    """Secret for signing access tokens (set JWT_SECRET outside development)."""
    return os.getenv("JWT_SECRET", "") or DEV_JWT_SECRET


def get_access_token_minutes() -> int:
    """Access token lifetime in minutes."""
    return int(os.getenv("ACCESS_TOKEN_MINUTES", "1440"))
