"""Local storage and download of RFC documents."""

from rfcnav.collection.config import RfcConfig
from rfcnav.collection.document_cache import DocumentCache, cached_document_path
from rfcnav.collection.fetcher import DocumentFetcher

__all__ = [
    "DocumentCache",
    "DocumentFetcher",
    "RfcConfig",
    "cached_document_path",
]
