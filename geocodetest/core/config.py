"""
Centralized configuration management for the geocodetest harness.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from geocodetest.core.config import settings

    # Access configuration
    print(settings.GOOGLE_BASE_URL)
    print(settings.DEFAULT_DISTANCE)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlparse
from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path.cwd() / ".env",  # Current working directory
    Path(__file__).parent.parent.parent / ".env",  # Project root
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name, "").strip()
    return float(value) if value else None


@dataclass
class Settings:
    """Harness settings loaded from environment variables."""

    # ==========================================================================
    # Geocoding Endpoints
    # ==========================================================================
    GOOGLE_BASE_URL: str = field(
        default_factory=lambda: os.getenv(
            "GOOGLE_BASE_URL",
            "http://maps.googleapis.com"
        )
    )
    DSTK_BASE_URL: str = field(
        default_factory=lambda: os.getenv(
            "DSTK_BASE_URL",
            "http://www.datasciencetoolkit.org"
        )
    )
    NOMINATIM_SEARCH_URL: str = field(
        default_factory=lambda: os.getenv(
            "NOMINATIM_SEARCH_URL",
            "http://nominatim.openstreetmap.org/search/"
        )
    )

    # ==========================================================================
    # HTTP Settings
    # ==========================================================================
    USER_AGENT: str = field(
        default_factory=lambda: os.getenv(
            "GEOCODETEST_USER_AGENT",
            "geocodetest - measures geocoder quality across services"
        )
    )
    # None leaves the timeout to requests (no timeout)
    HTTP_TIMEOUT: Optional[float] = field(
        default_factory=lambda: _optional_float("HTTP_TIMEOUT")
    )

    # ==========================================================================
    # Comparison
    # ==========================================================================
    DEFAULT_DISTANCE: int = field(
        default_factory=lambda: int(os.getenv("DEFAULT_DISTANCE", "100"))
    )

    def validate_urls(self) -> bool:
        """Check that every geocoding endpoint is an absolute http(s) URL."""
        for url in (self.GOOGLE_BASE_URL, self.DSTK_BASE_URL, self.NOMINATIM_SEARCH_URL):
            parsed = urlparse(url)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                return False
        return True


# Singleton settings instance
settings = Settings()
