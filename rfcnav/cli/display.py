"""Terminal rendering of a document location."""
# ruff: noqa: T201

from __future__ import annotations

from typing import TYPE_CHECKING

from rfcnav.navigation.pages import find_page_breaks, page_at_row

if TYPE_CHECKING:
    from rfcnav.host.workspace import TextDocument


def print_location(document: TextDocument, context: int = 0) -> None:
    """Print the cursor location and, if ``context`` > 0, lines around it."""
    cursor = document.cursor
    page = page_at_row(document, cursor.row)
    pages = len(find_page_breaks(document)) + 1
    print(
        f"{document.path}: page {page}/{pages}, "
        f"line {cursor.row + 1}, column {cursor.column + 1}"
    )

    if context <= 0:
        return

    first = max(0, cursor.row - context)
    last = min(document.last_row(), cursor.row + context)
    for row in range(first, last + 1):
        marker = ">" if row == cursor.row else " "
        text = document.line_text(row).replace("\f", "^L")
        print(f"{marker}{row + 1:6d}  {text}")
