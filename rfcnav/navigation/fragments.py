"""Resolution of URI fragments to positions inside an RFC document.

Supported fragments:

- ``page-<n>``: jump to a form-feed delimited page
- ``section-<name>``, ``appendix-<name>``, ``ref-<name>``: jump to the first
  line carrying that structural marker
- ``L<row>[C<col>]`` or ``L<row>[C<col>]-L<row>[C<col>]``: select a 1-indexed
  line/column position or range, as in GitHub blob links
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rfcnav.core.models import Position, Range
from rfcnav.navigation.pages import PageIndex

if TYPE_CHECKING:
    from rfcnav.core.interfaces import DocumentInterface

LOGGER = logging.getLogger("rfcnav.navigation.fragments")

_MARKER = re.compile(r"(appendix|section|ref|page)-([^-].*)", re.DOTALL)
_PAGE_TOKEN = re.compile(r"\d+")
_LINE_MARKER = re.compile(r"L(\d+)(?:C(\d+))?")
_MAX_LINE_MARKERS = 2


@dataclass(frozen=True)
class MarkerPattern:
    """A line pattern: regex prefix, then a literal token, then a regex suffix."""

    prefix: str
    token: str
    suffix: str

    @property
    def source(self) -> str:
        return f"{self.prefix}{re.escape(self.token)}{self.suffix}"

    def compile(self) -> re.Pattern[str]:
        return re.compile(self.source, re.MULTILINE)


def appendix_pattern(token: str) -> MarkerPattern:
    return MarkerPattern(r"^ *Appendix +", token, "")


def section_pattern(token: str) -> MarkerPattern:
    return MarkerPattern(r"^ *", token, r"\.? ")


def ref_pattern(token: str) -> MarkerPattern:
    return MarkerPattern(r"^ +\[", token, r"\] ")


MARKER_PATTERNS: dict[str, Callable[[str], MarkerPattern]] = {
    "appendix": appendix_pattern,
    "section": section_pattern,
    "ref": ref_pattern,
}


def parse_line_range(fragment: str) -> Range | None:
    """Parse ``L<row>[C<col>][-L<row>[C<col>]]`` into a zero-indexed range.

    Returns None if the fragment does not start with a line marker.
    """
    positions: list[Position] = []
    index = 0
    while len(positions) < _MAX_LINE_MARKERS:
        match = _LINE_MARKER.match(fragment, index)
        if match is None:
            break
        row = int(match.group(1)) - 1
        column = int(match.group(2)) - 1 if match.group(2) else 0
        positions.append(Position(row, column).clamped())
        index = match.end()
        if not fragment.startswith("-", index):
            break
        index += 1

    if not positions:
        return None
    start = positions[0]
    end = positions[1] if len(positions) > 1 else start
    return Range(start, end)


class FragmentResolver:
    """Apply a fragment string to an open document."""

    def __init__(self, page_index: PageIndex | None = None):
        self.page_index = page_index or PageIndex()

    def apply_fragment(self, fragment: str | None, document: DocumentInterface) -> DocumentInterface:
        """Move the selection of ``document`` to the location named by ``fragment``.

        Unrecognized fragments and markers that are not found leave the
        document untouched.

        Returns:
            The same document
        """
        fragment = "" if fragment is None else str(fragment)
        if not fragment:
            return document

        marker = _MARKER.fullmatch(fragment)
        if marker is not None:
            kind, token = marker.groups()
            if kind == "page":
                if _PAGE_TOKEN.fullmatch(token):
                    self.page_index.go_to_page(int(token), document)
                return document
            self._jump_to_marker(MARKER_PATTERNS[kind](token), document)
            return document

        selection = parse_line_range(fragment)
        if selection is not None:
            document.set_selected_range(selection)
            document.scroll_to(selection.start)
        return document

    def _jump_to_marker(self, pattern: MarkerPattern, document: DocumentInterface) -> None:
        match = pattern.compile().search(document.get_text())
        if match is None:
            LOGGER.debug(f"No line matches {pattern.source!r}")
            return
        position = document.position_for_offset(match.start())
        document.set_selected_range(Range(position, position))
        document.scroll_to(position, center=True)
