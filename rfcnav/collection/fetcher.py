"""HTTP retrieval of RFC documents."""

import logging

import requests

from rfcnav import __version__
from rfcnav.core.errors import FetchError

LOGGER = logging.getLogger("rfcnav.collection.fetcher")


class DocumentFetcher:
    """Download raw document bytes over HTTP."""

    def __init__(self, timeout: float = 30.0, session: requests.Session | None = None):
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds
            session: Optional session to reuse connections
        """
        self.timeout = timeout
        self.session = session
        self.headers = {"User-Agent": f"rfcnav/{__version__}"}

    def fetch(self, url: str) -> bytes:
        """Fetch ``url`` and return the response body unchanged.

        Raises:
            FetchError: If the request fails or returns a non-200 status
        """
        LOGGER.debug(f"GET {url}")
        getter = self.session.get if self.session is not None else requests.get
        try:
            response = getter(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as error:
            raise FetchError(url, str(error)) from error

        if response.status_code != 200:
            raise FetchError(url, f"server returned status {response.status_code}")

        return response.content
