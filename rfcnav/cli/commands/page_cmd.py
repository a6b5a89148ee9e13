"""Page commands - Jump between form-feed delimited pages of a file."""
# ruff: noqa: T201

from __future__ import annotations

import argparse
from pathlib import Path

from rfcnav.cli.display import print_location
from rfcnav.core.models import Range
from rfcnav.host.prompt import ConsolePrompt
from rfcnav.host.workspace import DEFAULT_ROWS_PER_PAGE, Workspace
from rfcnav.navigation.pages import PageIndex


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        type=Path,
        help="Plain-text document to navigate",
    )

    parser.add_argument(
        "--row",
        type=int,
        default=1,
        help="Starting line number, 1-indexed (default: 1)",
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


def add_go_to_page_arguments(parser: argparse.ArgumentParser) -> None:
    """Add go-to-page arguments."""
    _add_common_arguments(parser)
    parser.add_argument(
        "page",
        nargs="?",
        help="Page number (prompted for when omitted)",
    )


def add_step_arguments(parser: argparse.ArgumentParser) -> None:
    """Add next-page / prev-page arguments."""
    _add_common_arguments(parser)


def _run(args: argparse.Namespace, action: str) -> int:
    try:
        workspace = Workspace(rows_per_page=args.rows_per_page)
        document = workspace.open(args.file)
        document.set_selected_range(Range.at(max(0, args.row - 1)))

        page_index = PageIndex(host=workspace, prompter=ConsolePrompt())
        if action == "go-to-page":
            page_index.go_to_page(args.page, document)
        elif action == "next-page":
            page_index.next_page(document)
        else:
            page_index.prev_page(document)

        print_location(document, args.context)
        return 0

    except Exception as e:
        print(f"✗ {action} failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def execute_go_to_page(args: argparse.Namespace) -> int:
    """Execute the go-to-page command."""
    return _run(args, "go-to-page")


def execute_next_page(args: argparse.Namespace) -> int:
    """Execute the next-page command."""
    return _run(args, "next-page")


def execute_prev_page(args: argparse.Namespace) -> int:
    """Execute the prev-page command."""
    return _run(args, "prev-page")
