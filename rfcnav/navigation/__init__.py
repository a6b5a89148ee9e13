"""Page, fragment, and address navigation inside RFC documents."""

from rfcnav.navigation.address import parse_rfc_reference, parse_rfc_uri
from rfcnav.navigation.detect import is_rfc_filename
from rfcnav.navigation.fragments import FragmentResolver, MarkerPattern, parse_line_range
from rfcnav.navigation.pages import PageIndex, find_page_breaks, page_at_row

__all__ = [
    "FragmentResolver",
    "MarkerPattern",
    "PageIndex",
    "find_page_breaks",
    "is_rfc_filename",
    "page_at_row",
    "parse_line_range",
    "parse_rfc_reference",
    "parse_rfc_uri",
]
