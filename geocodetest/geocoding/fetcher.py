"""
HTTP/JSON fetcher shared by all geocoding providers.

Each call issues a single blocking GET. Failures come back as None and are
only reported (to the log) when the fetcher was built with verbose=True.
"""

import json
import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON, though the json module accepts them
    raise ValueError(f"Invalid JSON constant: {name}")


class JsonFetcher:
    """
    Fetch URLs and decode JSON bodies without ever raising to the caller.

    Usage:
        fetcher = JsonFetcher(user_agent="geocodetest")
        data = fetcher.get_json("http://example.com/api?q=1")
    """

    def __init__(
        self,
        user_agent: str,
        verbose: bool = False,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            user_agent: Identifying User-Agent header sent with every request
            verbose: Log diagnostics for failed requests
            timeout: Seconds before giving up (None keeps the requests default)
            session: Session to reuse (a new one is created if not provided)
        """
        self.user_agent = user_agent
        self.verbose = verbose
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_http(self, url: str) -> Optional[bytes]:
        """Return the raw response body, or None on a transport failure or non-200 status."""
        headers = {"User-Agent": self.user_agent}

        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            if self.verbose:
                logger.warning(f"Request failed for '{url}': {e}")
            return None

        if response.status_code != 200:
            if self.verbose:
                logger.warning(f"Bad response code {response.status_code} for '{url}'")
            return None

        return response.content

    def get_json(self, url: str) -> Optional[Any]:
        """Return the decoded JSON body, or None if the fetch or the parse failed."""
        body = self.get_http(url)
        if body is None:
            return None

        try:
            return json.loads(body, parse_constant=_reject_constant)
        except ValueError:
            if self.verbose:
                logger.warning(f"Couldn't parse as JSON: '{body.decode('utf-8', errors='replace')}'")
            return None

    def close(self):
        """Close the underlying session."""
        self.session.close()
