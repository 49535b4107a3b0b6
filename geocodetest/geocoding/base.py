"""
Base classes and interfaces for geocoding providers.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """A point in decimal degrees, as returned by any geocoding provider."""

    lat: float
    lng: float

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"lat": self.lat, "lng": self.lng}


class FailureReason(str, Enum):
    """Why a provider could not produce a coordinate."""

    BAD_RESPONSE = "bad_response"  # transport failure or unparseable body
    UNEXPECTED_SHAPE = "unexpected_shape"
    BAD_STATUS = "bad_status"
    NO_RESULTS = "no_results"
    NO_COORDINATES = "no_coordinates"


class GeocodingError(Exception):
    """Exception raised when geocoding fails."""

    def __init__(
        self,
        message: str,
        reason: FailureReason = FailureReason.BAD_RESPONSE,
        provider: str = "",
        address: str = "",
        url: str = "",
    ):
        self.message = message
        self.reason = reason
        self.provider = provider
        self.address = address
        self.url = url
        super().__init__(f"[{provider}] {message}" if provider else message)


class BaseGeocoder(ABC):
    """
    Abstract base class for geocoding providers.

    Subclasses must implement:
    - lookup(): Geocode a single address, raising GeocodingError on failure
    - provider_name: Name of the provider

    Callers use geocode(), which turns every GeocodingError into None.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the geocoding provider."""
        pass

    @abstractmethod
    def lookup(self, address: str) -> Coordinate:
        """
        Geocode a single address.

        Args:
            address: Free-text address, used verbatim

        Returns:
            Coordinate of the first (best) match

        Raises:
            GeocodingError: If the service gave no usable coordinate
        """
        pass

    def geocode(self, address: str) -> Optional[Coordinate]:
        """
        Geocode a single address, collapsing every failure to None.

        Args:
            address: Free-text address, used verbatim

        Returns:
            Coordinate if successful, None if not found or on any error
        """
        try:
            return self.lookup(address)
        except GeocodingError as e:
            if self.verbose:
                logger.warning(str(e))
            return None

    def _fail(self, message: str, reason: FailureReason, address: str, url: str) -> GeocodingError:
        return GeocodingError(
            f"{message} for URL '{url}'",
            reason=reason,
            provider=self.provider_name,
            address=address,
            url=url,
        )

    def _make_coordinate(self, lat: float, lng: float, address: str, url: str, detail: str) -> Coordinate:
        """Build a Coordinate, rejecting NaN and infinite values."""
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise self._fail(
                f"Geocoding returned non-finite coordinates in {detail}",
                FailureReason.NO_COORDINATES, address, url
            )
        return Coordinate(lat=lat, lng=lng)
