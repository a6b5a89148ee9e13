"""Cache-dir command - Show the resolved RFC cache directory."""
# ruff: noqa: T201

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rfcnav.collection.config import RfcConfig
from rfcnav.core.paths import PathResolver

if TYPE_CHECKING:
    import argparse


def add_arguments(parser: argparse.ArgumentParser) -> None:  # noqa: ARG001
    """Add command-specific arguments."""


def execute(args: argparse.Namespace) -> int:
    """Execute the cache-dir command."""
    try:
        config = RfcConfig.load(config_path=args.config)
        cache_dir = PathResolver().expand_path(config.cache_directory)
        if not cache_dir:
            print("No cache directory configured")
            return 1

        print(Path(cache_dir).absolute())
        if args.verbose:
            print(f"  Downloads enabled: {config.download_enabled}")
            print(f"  Download source:   {config.download_source}")
        return 0
    except Exception as error:
        print(f"Cache lookup failed: {error}")
        return 1
