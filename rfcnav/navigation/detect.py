"""Recognition of RFC-series plain-text documents by file name."""

import re
from pathlib import Path

_RFC_FILENAME = re.compile(r"(?:rfc|bcp|fyi|ien|std)\d+\.txt")


def is_rfc_filename(path: str | Path | None) -> bool:
    """Return True for names like ``rfc2223.txt``, ``bcp14.txt`` or ``std7.txt``."""
    if not path:
        return False
    return _RFC_FILENAME.fullmatch(Path(path).name) is not None
