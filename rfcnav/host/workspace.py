"""File-backed document host used by the command line interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rfcnav.core.interfaces import DocumentHostInterface, DocumentInterface
from rfcnav.core.models import Position, Range
from rfcnav.navigation.detect import is_rfc_filename

LOGGER = logging.getLogger("rfcnav.host.workspace")

DEFAULT_ROWS_PER_PAGE = 24


class TextDocument(DocumentInterface):
    """An in-memory line buffer with a single selection and scroll target."""

    def __init__(
        self,
        text: str = "",
        path: Path | None = None,
        rows_per_page: int = DEFAULT_ROWS_PER_PAGE,
    ):
        self._path = path
        self._rows_per_page = rows_per_page
        self._lines = [line.removesuffix("\r") for line in text.split("\n")]
        self._selection = Range()
        self.scroll_position = Position()
        self.scroll_centered = False

    @classmethod
    def from_file(cls, path: Path, rows_per_page: int = DEFAULT_ROWS_PER_PAGE) -> TextDocument:
        text = path.read_text(encoding="utf-8", errors="replace")
        return cls(text, path=path, rows_per_page=rows_per_page)

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def rows_per_page(self) -> int:
        return self._rows_per_page

    @property
    def is_rfc(self) -> bool:
        return is_rfc_filename(self._path)

    def line_count(self) -> int:
        return len(self._lines)

    def line_text(self, row: int) -> str:
        if 0 <= row < len(self._lines):
            return self._lines[row]
        return ""

    def get_text(self) -> str:
        return "\n".join(self._lines)

    def get_selected_range(self) -> Range:
        return self._selection

    def set_selected_range(self, selection: Range) -> None:
        self._selection = Range(self._clip(selection.start), self._clip(selection.end))

    def scroll_to(self, position: Position, center: bool = False) -> None:
        self.scroll_position = self._clip(position)
        self.scroll_centered = center

    @property
    def cursor(self) -> Position:
        return self._selection.start

    def _clip(self, position: Position) -> Position:
        row = max(0, min(position.row, self.last_row()))
        column = max(0, min(position.column, len(self._lines[row])))
        return Position(row, column)

    def visible_rows(self) -> range:
        """Rows shown in the viewport for the current scroll target."""
        height = max(1, self._rows_per_page)
        target = self.scroll_position.row
        first = target - height // 2 if self.scroll_centered else target - height + 1
        first = max(0, min(first, self.line_count() - height))
        return range(first, min(first + height, self.line_count()))


@dataclass
class Notification:
    """An error notification raised through the host."""

    message: str
    detail: str = ""


class Workspace(DocumentHostInterface):
    """Tracks open documents keyed by resolved path."""

    def __init__(self, rows_per_page: int = DEFAULT_ROWS_PER_PAGE):
        self.rows_per_page = rows_per_page
        self.documents: dict[Path, TextDocument] = {}
        self.notifications: list[Notification] = []
        self._active: TextDocument | None = None

    @staticmethod
    def _key(path: Path) -> Path:
        return Path(path).expanduser().resolve()

    def find_open(self, path: Path) -> TextDocument | None:
        return self.documents.get(self._key(path))

    def open(self, path: Path) -> TextDocument:
        key = self._key(path)
        document = self.documents.get(key)
        if document is None:
            document = TextDocument.from_file(key, rows_per_page=self.rows_per_page)
            self.documents[key] = document
            LOGGER.debug(f"Opened {key} ({document.line_count()} lines)")
        self._active = document
        return document

    @property
    def active_document(self) -> TextDocument | None:
        return self._active

    def notify_error(self, message: str, detail: str = "") -> None:
        self.notifications.append(Notification(message, detail))
        LOGGER.error(f"{message}: {detail}" if detail else message)
