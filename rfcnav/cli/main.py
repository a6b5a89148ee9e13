"""Main CLI entry point for the RFC navigator."""
# ruff: noqa: T201

import argparse
import logging
import sys
from pathlib import Path

from rfcnav.cli.commands import cache_cmd, open_cmd, page_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="rfcnav",
        description="RFC Navigator - open, cache, and page through IETF RFC documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rfcnav open-rfc 2223
  rfcnav open-rfc "rfc:2223#section-3.2"
  rfcnav open-rfc 793 --fragment page-12
  rfcnav go-to-page ~/.cache/rfc/rfc2223.txt 4
  rfcnav next-page rfc2223.txt --row 120
  rfcnav cache-dir
        """,
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        metavar="COMMAND"
    )

    open_parser = subparsers.add_parser(
        "open-rfc",
        help="Open an RFC, downloading it into the cache if needed",
        description="Resolve an RFC number or rfc: URI and jump to its fragment"
    )
    open_cmd.add_arguments(open_parser)

    goto_parser = subparsers.add_parser(
        "go-to-page",
        help="Jump to a page of a paginated document",
        description="Move to page N of a form-feed delimited document"
    )
    page_cmd.add_go_to_page_arguments(goto_parser)

    next_parser = subparsers.add_parser(
        "next-page",
        help="Move to the next page boundary",
        description="Move down to the next form-feed page boundary"
    )
    page_cmd.add_step_arguments(next_parser)

    prev_parser = subparsers.add_parser(
        "prev-page",
        help="Move to the previous page boundary",
        description="Move up to the previous form-feed page boundary"
    )
    page_cmd.add_step_arguments(prev_parser)

    cache_parser = subparsers.add_parser(
        "cache-dir",
        help="Show the RFC cache directory",
        description="Print the resolved cache directory from configuration"
    )
    cache_cmd.add_arguments(cache_parser)

    return parser


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        return 1

    log_level = logging.DEBUG if parsed_args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Route to appropriate command handler
    try:
        if parsed_args.command == "open-rfc":
            return open_cmd.execute(parsed_args)
        if parsed_args.command == "go-to-page":
            return page_cmd.execute_go_to_page(parsed_args)
        if parsed_args.command == "next-page":
            return page_cmd.execute_next_page(parsed_args)
        if parsed_args.command == "prev-page":
            return page_cmd.execute_prev_page(parsed_args)
        if parsed_args.command == "cache-dir":
            return cache_cmd.execute(parsed_args)
        print(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except Exception as e:
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
