"""Form-feed pagination of plain-text RFC documents."""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING

from rfcnav.core.models import Position, Range

if TYPE_CHECKING:
    from rfcnav.core.interfaces import (
        DocumentHostInterface,
        DocumentInterface,
        PromptInterface,
    )

LOGGER = logging.getLogger("rfcnav.navigation.pages")

PAGE_BREAK = "\f"

# Rows kept above the landing row after a page jump
PAGE_HEADER_ROWS = 2
# Rows between the new page's boundary and the bottom of the viewport
NEXT_PAGE_MARGIN = 5

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def is_page_break(line: str) -> bool:
    """Return True if ``line`` consists solely of a form feed."""
    return line == PAGE_BREAK


def find_page_breaks(document: DocumentInterface) -> list[int]:
    """Return the rows of every page-boundary line, top to bottom."""
    return [
        row for row in range(document.line_count()) if is_page_break(document.line_text(row))
    ]


def page_at_row(document: DocumentInterface, row: int) -> int:
    """Return the 1-indexed page containing ``row``.

    A boundary line counts toward the page it opens.
    """
    return 1 + sum(1 for boundary in find_page_breaks(document) if boundary <= row)


def parse_page_number(value: object) -> int | None:
    """Coerce a page argument to an integer, or None if it is not a number."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return round(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        return int(match.group(1)) if match else None
    return None


class PageIndex:
    """Jump between form-feed delimited pages of a document."""

    def __init__(
        self,
        host: DocumentHostInterface | None = None,
        prompter: PromptInterface | None = None,
    ):
        """Initialize page navigation.

        Args:
            host: Supplies the active document when none is passed explicitly
            prompter: Asks for a page number when ``go_to_page`` gets none
        """
        self.host = host
        self.prompter = prompter

    def _resolve_document(self, document: DocumentInterface | None) -> DocumentInterface | None:
        if document is not None:
            return document
        if self.host is not None:
            return self.host.active_document
        return None

    def page_count(self, document: DocumentInterface) -> int:
        return len(find_page_breaks(document)) + 1

    def go_to_line(
        self,
        row: int,
        offset: int = 0,
        document: DocumentInterface | None = None,
    ) -> None:
        """Place a cursor at the start of ``row`` and scroll to ``row + offset``."""
        document = self._resolve_document(document)
        if document is None:
            return
        last_row = document.last_row()
        row = max(0, min(row, last_row))
        document.set_selected_range(Range.at(row))
        document.scroll_to(Position(max(0, min(row + offset, last_row)), 0))

    def go_to_page(
        self,
        number: object = None,
        document: DocumentInterface | None = None,
    ) -> None:
        """Jump to page ``number``, prompting for one if it is not numeric.

        Page numbers are clamped to the pages the document has. Cancelled or
        non-numeric prompt input does nothing.
        """
        page = parse_page_number(number)
        if page is None:
            if self.prompter is None:
                return
            value = self.prompter.prompt("Enter a page number")
            page = parse_page_number(value) if value is not None else None
            if page is None:
                return

        document = self._resolve_document(document)
        if document is None:
            return

        LOGGER.info(f"Jumping to page: {page}")
        breaks = find_page_breaks(document)
        page = max(1, min(page, len(breaks) + 1))

        if page == 1:
            origin = Position(0, 0)
            document.set_selected_range(Range(origin, origin))
            document.scroll_to(origin)
            return

        boundary = breaks[page - 2]
        upper = breaks[page - 1] - 1 if page - 1 < len(breaks) else document.last_row()
        row = boundary + max(1, document.rows_per_page - PAGE_HEADER_ROWS)
        row = min(row, upper, document.last_row())
        row = max(row, min(boundary + 1, document.last_row()))

        position = Position(row, 0)
        document.set_selected_range(Range(position, position))
        document.scroll_to(position)

    def prev_page(self, document: DocumentInterface | None = None) -> None:
        """Move up to the nearest boundary above the selection, or the top."""
        document = self._resolve_document(document)
        if document is None:
            return

        start = document.get_selected_range().rows[0]
        if is_page_break(document.line_text(start)):
            start -= 1
        for row in range(start, -1, -1):
            if row == 0 or is_page_break(document.line_text(row)):
                self.go_to_line(row, 0, document)
                return

    def next_page(self, document: DocumentInterface | None = None) -> None:
        """Move down to the nearest boundary below the selection, or the end."""
        document = self._resolve_document(document)
        if document is None:
            return

        last_row = document.last_row()
        start = document.get_selected_range().rows[1]
        if is_page_break(document.line_text(start)):
            start += 1
        for row in range(start, last_row + 1):
            if row >= last_row or is_page_break(document.line_text(row)):
                self.go_to_line(row, document.rows_per_page - NEXT_PAGE_MARGIN, document)
                return
