"""
Core module providing shared configuration and utilities.

This module consolidates common functionality used across the codebase:
- Configuration management (settings, environment variables)
- Utility functions (geo)

Usage:
    from geocodetest.core import settings
    from geocodetest.core.utils import distance_from_lat_lon
"""

from geocodetest.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
