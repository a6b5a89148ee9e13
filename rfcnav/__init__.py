"""RFC Navigator (rfcnav).

Navigation and retrieval for IETF RFC documents rendered as paginated plain
text: page jumps across form-feed boundaries, ``rfc:`` URI and fragment
resolution, and a local document cache that downloads missing RFCs.
"""

__version__ = "0.1.0"

# Public API exports
from rfcnav.collection.config import RfcConfig
from rfcnav.collection.document_cache import DocumentCache
from rfcnav.core.models import Position, Range, ResolveResult, ResolveStatus, RfcAddress
from rfcnav.navigation.fragments import FragmentResolver
from rfcnav.navigation.pages import PageIndex

__all__ = [
    "DocumentCache",
    "FragmentResolver",
    "PageIndex",
    "Position",
    "Range",
    "ResolveResult",
    "ResolveStatus",
    "RfcAddress",
    "RfcConfig",
]
