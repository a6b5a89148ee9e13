"""CLI command modules for the RFC navigator."""

from . import (
    cache_cmd,
    open_cmd,
    page_cmd,
)

__all__ = [
    "cache_cmd",
    "open_cmd",
    "page_cmd",
]
