"""Core components of the RFC navigation system.

This module contains the data models, host interfaces, and path resolution
that the cache and navigation layers build on.
"""

from rfcnav.core.interfaces import (
    DirectoryServiceInterface,
    DocumentHostInterface,
    DocumentInterface,
    PromptInterface,
)
from rfcnav.core.models import Position, Range, ResolveResult, ResolveStatus, RfcAddress
from rfcnav.core.paths import PathResolver, UserList

__all__ = [
    "DirectoryServiceInterface",
    "DocumentHostInterface",
    "DocumentInterface",
    "PathResolver",
    "Position",
    "PromptInterface",
    "Range",
    "ResolveResult",
    "ResolveStatus",
    "RfcAddress",
    "UserList",
]
