"""Local cache of RFC documents with on-demand download."""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from rfcnav.collection.fetcher import DocumentFetcher
from rfcnav.core.errors import FetchError
from rfcnav.core.models import ResolveResult, ResolveStatus
from rfcnav.core.paths import PathResolver
from rfcnav.navigation.fragments import FragmentResolver

if TYPE_CHECKING:
    from rfcnav.collection.config import RfcConfig
    from rfcnav.core.interfaces import DocumentHostInterface, DocumentInterface

LOGGER = logging.getLogger("rfcnav.collection.document_cache")


def cached_document_path(cache_dir: Path, number: int) -> Path:
    """Return the cache location for an RFC: ``<cache_dir>/rfc<N>.txt``."""
    return cache_dir / f"rfc{number}.txt"


class DocumentCache:
    """Resolve RFC numbers to open documents, downloading missing ones."""

    def __init__(
        self,
        host: DocumentHostInterface,
        config: RfcConfig,
        path_resolver: PathResolver | None = None,
        fetcher: DocumentFetcher | None = None,
        fragment_resolver: FragmentResolver | None = None,
    ):
        """Initialize the cache.

        Args:
            host: Document host used to locate and open documents
            config: Initial settings; see ``configure``
            path_resolver: Expands the configured cache directory
            fetcher: HTTP fetcher; built from ``config.request_timeout`` if omitted
            fragment_resolver: Applies fragments once a document is open
        """
        self.host = host
        self.path_resolver = path_resolver or PathResolver()
        self.fragment_resolver = fragment_resolver or FragmentResolver()
        self._fetcher = fetcher
        self._config: RfcConfig | None = None
        self._cache_dir: Path | None = None
        self._locks: dict[int, tuple[threading.Lock, int]] = {}
        self._locks_guard = threading.Lock()
        self.configure(config)

    @property
    def config(self) -> RfcConfig | None:
        return self._config

    @property
    def cache_dir(self) -> Path | None:
        """Absolute cache directory, or None while unconfigured."""
        return self._cache_dir

    @property
    def fetcher(self) -> DocumentFetcher:
        if self._fetcher is None:
            timeout = self._config.request_timeout if self._config else 30.0
            self._fetcher = DocumentFetcher(timeout=timeout)
        return self._fetcher

    def configure(self, config: RfcConfig) -> None:
        """Apply new settings, re-deriving the cache directory."""
        self._config = config
        expanded = self.path_resolver.expand_path(config.cache_directory)
        self._cache_dir = Path(expanded).absolute() if expanded else None
        LOGGER.debug(f"Cache directory: {self._cache_dir}")

    @contextlib.contextmanager
    def _download_lock(self, number: int) -> Iterator[None]:
        """Hold the per-RFC download lock; the entry is dropped by its last user."""
        with self._locks_guard:
            lock, users = self._locks.get(number, (None, 0))
            lock = lock or threading.Lock()
            self._locks[number] = (lock, users + 1)
        try:
            with lock:
                yield
        finally:
            with self._locks_guard:
                _, users = self._locks[number]
                if users > 1:
                    self._locks[number] = (lock, users - 1)
                else:
                    del self._locks[number]

    def resolve(self, number: int, fragment: str = "") -> ResolveResult:
        """Open RFC ``number`` and apply ``fragment`` to it.

        Args:
            number: RFC number; non-positive numbers are ignored
            fragment: Optional fragment such as ``section-3.2`` or ``L10``

        Returns:
            ResolveResult describing the outcome; failures to download or
            write are reported to the host and returned, never raised
        """
        if self._cache_dir is None or number <= 0:
            return ResolveResult(ResolveStatus.SKIPPED)

        target = cached_document_path(self._cache_dir, number)

        document = self.host.find_open(target)
        if document is not None:
            LOGGER.debug(f"RFC {number} already open")
            return self._finish(ResolveStatus.OPENED, target, document, fragment)

        if target.exists():
            LOGGER.info(f"Opening cached RFC {number}: {target}")
            return self._open(ResolveStatus.OPENED, target, fragment)

        if not self._config.download_enabled:
            LOGGER.info(f"RFC {number} is not cached and downloads are disabled")
            return ResolveResult(ResolveStatus.SKIPPED, path=target)

        with self._download_lock(number):
            if target.exists():
                return self._open(ResolveStatus.OPENED, target, fragment)

            url = self._config.download_url(number)
            partial = target.with_name(f"{target.name}.part")
            LOGGER.info(f"Downloading RFC {number} from {url}")
            try:
                self._cache_dir.mkdir(parents=True, exist_ok=True)
                content = self.fetcher.fetch(url)
                partial.write_bytes(content)
                partial.replace(target)
            except (FetchError, OSError) as error:
                with contextlib.suppress(OSError):
                    partial.unlink(missing_ok=True)
                return self._fail(f"Failed to download RFC {number}", error, target)

            LOGGER.info(f"Saved RFC {number} ({len(content)} bytes) to {target}")
        return self._open(ResolveStatus.FETCHED, target, fragment)

    def _open(self, status: ResolveStatus, target: Path, fragment: str) -> ResolveResult:
        try:
            document = self.host.open(target)
        except OSError as error:
            return self._fail(f"Failed to open {target.name}", error, target)
        return self._finish(status, target, document, fragment)

    def _finish(
        self,
        status: ResolveStatus,
        target: Path,
        document: DocumentInterface,
        fragment: str,
    ) -> ResolveResult:
        document = self.fragment_resolver.apply_fragment(fragment, document)
        return ResolveResult(status, path=target, document=document)

    def _fail(self, message: str, error: Exception, target: Path) -> ResolveResult:
        detail = str(error)
        LOGGER.warning(f"{message}: {detail}")
        self.host.notify_error(message, detail)
        return ResolveResult(ResolveStatus.FAILED, path=target, error=detail)
