"""Core data models for the RFC navigation system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from rfcnav.core.interfaces import DocumentInterface


@dataclass(frozen=True, order=True)
class Position:
    """Zero-indexed row/column location inside a document."""

    row: int = 0
    column: int = 0

    def clamped(self) -> Position:
        return Position(max(0, self.row), max(0, self.column))


@dataclass(frozen=True)
class Range:
    """A start/end pair of positions. Equal endpoints denote a cursor."""

    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    @classmethod
    def at(cls, row: int, column: int = 0) -> Range:
        position = Position(row, column)
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def rows(self) -> tuple[int, int]:
        """Return (min_row, max_row) covered by the range."""
        return (min(self.start.row, self.end.row), max(self.start.row, self.end.row))


@dataclass(frozen=True)
class RfcAddress:
    """An RFC number plus an optional fragment, e.g. ``rfc:2223#page-3``."""

    number: int
    fragment: str = ""

    @property
    def filename(self) -> str:
        return f"rfc{self.number}.txt"


class ResolveStatus(Enum):
    """Outcome of a DocumentCache resolution."""

    OPENED = "opened"
    FETCHED = "fetched"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class ResolveResult:
    """Result of resolving an RFC number to an open document."""

    status: ResolveStatus
    path: Path | None = None
    document: DocumentInterface | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status in (ResolveStatus.OPENED, ResolveStatus.FETCHED)


@dataclass
class UserRecord:
    """Account record for one login name."""

    name: str
    uid: int | None = None
    gid: int | None = None
    gecos: str = ""
    home: str = ""
    shell: str = ""
    password: str = ""
    user_class: str = ""
    change: str = ""
    expire: str = ""
