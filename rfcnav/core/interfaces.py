"""Abstract interfaces for the RFC navigation system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from rfcnav.core.models import Position, Range, UserRecord


class DocumentInterface(ABC):
    """Abstract interface for an open, line-oriented document."""

    @property
    @abstractmethod
    def path(self) -> Path | None:
        """Return the filesystem path backing the document, if any."""

    @property
    @abstractmethod
    def rows_per_page(self) -> int:
        """Return the number of rows visible in the viewport."""

    @abstractmethod
    def line_count(self) -> int:
        """Return the number of lines in the document."""

    @abstractmethod
    def line_text(self, row: int) -> str:
        """Return the text of a zero-indexed row, without line terminator.

        Rows outside the document return an empty string.
        """

    @abstractmethod
    def get_text(self) -> str:
        """Return the full document content joined with newlines."""

    @abstractmethod
    def get_selected_range(self) -> Range:
        """Return the primary selection."""

    @abstractmethod
    def set_selected_range(self, selection: Range) -> None:
        """Replace the primary selection."""

    @abstractmethod
    def scroll_to(self, position: Position, center: bool = False) -> None:
        """Scroll the viewport so that ``position`` is visible.

        Args:
            position: Target position
            center: Center the viewport on the position instead of
                scrolling the minimum distance
        """

    def last_row(self) -> int:
        """Return the index of the last row."""
        return max(0, self.line_count() - 1)

    def position_for_offset(self, offset: int) -> Position:
        """Convert a character offset into ``get_text()`` to a position."""
        text = self.get_text()
        offset = max(0, min(offset, len(text)))
        row = text.count("\n", 0, offset)
        line_start = text.rfind("\n", 0, offset) + 1
        return Position(row, offset - line_start)


class DocumentHostInterface(ABC):
    """Abstract interface for the component that owns open documents."""

    @abstractmethod
    def find_open(self, path: Path) -> DocumentInterface | None:
        """Return the already-open document for ``path``, if any."""

    @abstractmethod
    def open(self, path: Path) -> DocumentInterface:
        """Open ``path`` (or focus it if already open) and return it.

        Raises:
            OSError: If the file cannot be read
        """

    @property
    @abstractmethod
    def active_document(self) -> DocumentInterface | None:
        """Return the document that currently has focus."""

    @abstractmethod
    def notify_error(self, message: str, detail: str = "") -> None:
        """Surface an error notification to the user."""


class PromptInterface(ABC):
    """Abstract interface for single-value interactive input."""

    @abstractmethod
    def prompt(self, message: str, footnote: str = "", default: str = "") -> str | None:
        """Ask the user for a value.

        Args:
            message: Explanatory text shown above the input
            footnote: Additional text shown below the input
            default: Initial contents of the input

        Returns:
            The entered string, or None if the prompt was cancelled
        """


class DirectoryServiceInterface(ABC):
    """Abstract interface for a platform directory service listing users."""

    @abstractmethod
    def list_users(self) -> list[UserRecord]:
        """Enumerate user records known to the directory service."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the directory service name."""
