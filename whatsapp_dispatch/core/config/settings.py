"""
Settings for the whatsapp-dispatch plugin pair.

Values come from environment variables, with a ``.env`` file in the working
directory loaded first. Provider credentials are NOT read here; they come
from a credential store (see whatsapp_dispatch.domain.services.credential_store).
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(".env")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
ENVIRONMENTS = ("DEV", "PROD")
FALLBACK_VERSION = "0.1.0"


def _get_version_from_pyproject() -> str:
    """Project version from the nearest pyproject.toml above this file."""
    for directory in Path(__file__).resolve().parents:
        candidate = directory / "pyproject.toml"
        if not candidate.is_file():
            continue
        try:
            project = tomllib.loads(candidate.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError):
            continue
        version = project.get("project", {}).get("version")
        if version:
            return version

    return FALLBACK_VERSION


class Settings:
    """Environment-based settings, read once at import time."""

    def __init__(self):
        self.version: str = _get_version_from_pyproject()

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")
        self.environment: str = os.getenv("ENVIRONMENT", "DEV").upper()

        # Provider endpoints
        self.official_api_version: str = os.getenv("OFFICIAL_API_VERSION", "v18.0")
        self.official_base_url: str = os.getenv(
            "OFFICIAL_BASE_URL", "https://graph.facebook.com"
        )
        self.zapi_default_base_url: str = os.getenv(
            "ZAPI_DEFAULT_BASE_URL", "https://api.z-api.io"
        )

        # HTTP transport
        self.http_timeout_seconds: float = float(
            os.getenv("HTTP_TIMEOUT_SECONDS", "30")
        )

        self._validate_settings()

    def _validate_settings(self):
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}")

        # Unknown environments run as DEV
        if self.environment not in ENVIRONMENTS:
            self.environment = "DEV"

        if self.http_timeout_seconds <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be greater than zero")

    @property
    def is_development(self) -> bool:
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        return self.environment == "PROD"


settings = Settings()
