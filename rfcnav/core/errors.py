"""Exception types for the RFC navigation system."""


class RfcNavError(Exception):
    """Base class for rfcnav errors."""


class FetchError(RfcNavError):
    """Raised when a remote RFC document cannot be downloaded."""

    def __init__(self, url: str, detail: str):
        super().__init__(f"Could not fetch {url}: {detail}")
        self.url = url
        self.detail = detail
