"""Command surface for RFC navigation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rfcnav.collection.document_cache import DocumentCache
from rfcnav.core.models import RfcAddress
from rfcnav.navigation.address import parse_rfc_reference, parse_rfc_uri
from rfcnav.navigation.fragments import FragmentResolver
from rfcnav.navigation.pages import PageIndex

if TYPE_CHECKING:
    from rfcnav.collection.config import RfcConfig
    from rfcnav.core.interfaces import (
        DocumentHostInterface,
        DocumentInterface,
        PromptInterface,
    )
    from rfcnav.core.models import ResolveResult
    from rfcnav.core.paths import PathResolver

LOGGER = logging.getLogger("rfcnav.services.navigator_service")


class NavigatorService:
    """Service implementing the page and open-rfc commands."""

    def __init__(
        self,
        host: DocumentHostInterface,
        config: RfcConfig,
        prompter: PromptInterface | None = None,
        path_resolver: PathResolver | None = None,
        cache: DocumentCache | None = None,
    ):
        """Initialize navigator service.

        Args:
            host: Document host owning open documents
            config: Cache and download settings
            prompter: Source of interactive input for commands invoked without arguments
            path_resolver: Tilde expansion for the cache directory
            cache: Pre-built document cache (built from the other arguments if omitted)
        """
        self.host = host
        self.prompter = prompter
        self.page_index = PageIndex(host=host, prompter=prompter)
        self.fragment_resolver = FragmentResolver(self.page_index)
        self.cache = cache or DocumentCache(
            host,
            config,
            path_resolver=path_resolver,
            fragment_resolver=self.fragment_resolver,
        )

    def update_config(self, config: RfcConfig) -> None:
        """Observer for configuration changes."""
        self.cache.configure(config)

    def go_to_page(self, number: object = None, document: DocumentInterface | None = None) -> None:
        self.page_index.go_to_page(number, document)

    def next_page(self, document: DocumentInterface | None = None) -> None:
        self.page_index.next_page(document)

    def prev_page(self, document: DocumentInterface | None = None) -> None:
        self.page_index.prev_page(document)

    def open_address(self, address: RfcAddress) -> ResolveResult:
        suffix = f"#{address.fragment}" if address.fragment else ""
        LOGGER.info(f"Opening RFC {address.number}{suffix}")
        return self.cache.resolve(address.number, address.fragment)

    def open_uri(self, uri: str) -> ResolveResult | None:
        """Handle an ``rfc:`` URI.

        Returns:
            None if the URI is not a valid ``rfc:`` URI, so that other
            openers may handle it
        """
        address = parse_rfc_uri(uri)
        if address is None:
            return None
        return self.open_address(address)

    def open_rfc(self, value: int | str | None = None) -> ResolveResult | None:
        """Open an RFC given as a number or reference, prompting if omitted.

        Returns:
            The resolution result, or None if no usable reference was given
        """
        if value is None:
            if self.prompter is None:
                return None
            value = self.prompter.prompt(
                "Enter an RFC number",
                "Add #section-N, #appendix-A, #ref-NAME, #page-N or #L10 to jump to a location",
            )
            if value is None:
                return None

        if isinstance(value, int) and not isinstance(value, bool):
            address = RfcAddress(value) if value > 0 else None
        else:
            address = parse_rfc_reference(str(value))

        if address is None:
            LOGGER.debug(f"Ignoring unrecognized RFC reference: {value!r}")
            return None
        return self.open_address(address)
