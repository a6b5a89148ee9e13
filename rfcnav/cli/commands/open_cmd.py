"""Open command - Resolve an RFC reference, downloading it if necessary."""
# ruff: noqa: T201

from __future__ import annotations

import argparse

from rfcnav.cli.display import print_location
from rfcnav.collection.config import RfcConfig
from rfcnav.core.models import ResolveStatus
from rfcnav.host.prompt import ConsolePrompt
from rfcnav.host.workspace import DEFAULT_ROWS_PER_PAGE, Workspace
from rfcnav.services.navigator_service import NavigatorService


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add command-specific arguments."""
    parser.add_argument(
        "reference",
        nargs="?",
        help="RFC number, 'RFC 2223', or an rfc: URI such as rfc:2223#section-3 "
        "(prompted for when omitted)",
    )

    parser.add_argument(
        "--fragment",
        help="Location inside the document, e.g. section-3.2, page-4, L10-L12",
    )

    parser.add_argument(
        "--no-download",
        action="store_true",
        help="Only use the local cache, never download",
    )

    parser.add_argument(
        "--rows-per-page",
        type=int,
        default=DEFAULT_ROWS_PER_PAGE,
        help=f"Viewport height in rows (default: {DEFAULT_ROWS_PER_PAGE})",
    )

    parser.add_argument(
        "--context",
        type=int,
        default=3,
        help="Lines of context to print around the cursor (default: 3)",
    )


def execute(args: argparse.Namespace) -> int:
    """Execute the open-rfc command."""
    try:
        config = RfcConfig.load(config_path=args.config)
        if args.no_download:
            config = config.replace(download_enabled=False)

        workspace = Workspace(rows_per_page=args.rows_per_page)
        navigator = NavigatorService(workspace, config, prompter=ConsolePrompt())

        reference = args.reference
        if reference is not None and args.fragment:
            reference = f"{reference.split('#', 1)[0]}#{args.fragment}"

        result = navigator.open_rfc(reference)
        if result is None:
            print("Not a valid RFC reference")
            return 1

        if result.status == ResolveStatus.SKIPPED:
            if navigator.cache.cache_dir is None:
                print("No cache directory configured")
            else:
                print(f"{result.path} is not cached and downloads are disabled")
            return 1

        if result.status == ResolveStatus.FAILED:
            print(f"✗ {result.error}")
            return 1

        if result.status == ResolveStatus.FETCHED:
            print(f"💾 Downloaded to: {result.path}")
        print_location(result.document, args.context)
        return 0

    except Exception as e:
        print(f"✗ Open command failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1
