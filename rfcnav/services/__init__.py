"""Service layer for the RFC navigation system."""

from rfcnav.services.navigator_service import NavigatorService

__all__ = [
    "NavigatorService",
]
