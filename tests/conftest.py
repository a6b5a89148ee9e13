"""Root-level pytest configuration."""

import pytest

from rfcnav.collection.config import RfcConfig
from rfcnav.host.workspace import TextDocument, Workspace

LINES_PER_PAGE = 10


def paged_text(pages: int, lines_per_page: int = LINES_PER_PAGE) -> str:
    """Build a document of ``pages`` pages separated by form-feed lines."""
    blocks = []
    for page in range(1, pages + 1):
        blocks.append(
            "\n".join(f"Page {page} line {line}" for line in range(lines_per_page))
        )
    return "\n\f\n".join(blocks)


@pytest.fixture
def make_document():
    """Factory for paged in-memory documents."""

    def _make(pages: int = 5, rows_per_page: int = 5) -> TextDocument:
        return TextDocument(paged_text(pages), rows_per_page=rows_per_page)

    return _make


@pytest.fixture
def workspace():
    return Workspace()


@pytest.fixture
def rfc_config(tmp_path):
    """Config with a cache directory under tmp_path and downloads enabled."""
    return RfcConfig(cache_directory=str(tmp_path / "cache"))


@pytest.fixture
def paged():
    """Expose ``paged_text`` to tests that write documents to disk."""
    return paged_text
