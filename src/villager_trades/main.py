"""
Command-line interface for checking villager trade catalogs.

Loads every catalog below a directory exactly like a host reload would and
prints the collected diagnostics.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from villager_trades.core.reload_service import TradeReloadService
from villager_trades.core.settings import LoaderSettings
from villager_trades.host import ConsoleAudience, InMemoryTradeRegistry
from villager_trades.io import CatalogDirectorySource


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging from the loader if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        # Diagnostics are printed as a report; keep the per-error log lines quiet.
        level = logging.CRITICAL
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed command line arguments.
    """
    parser = argparse.ArgumentParser(
        prog="villager-trades",
        description="Validate villager trade catalogs and report every problem",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check every catalog below data/trades
  villager-trades check data/trades

  # Show loader activity
  villager-trades check data/trades --verbose

  # List the registered trade kinds
  villager-trades kinds
        """,
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose loader logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Load catalogs and report problems")
    check.add_argument(
        "catalog_dir", type=Path, help="Directory containing catalog files"
    )
    check.add_argument(
        "--namespace",
        default="minecraft",
        help="Namespace for identifiers written without one (default: minecraft)",
    )
    check.add_argument(
        "--summary-only",
        action="store_true",
        help="Print only the one-line summary of each diagnostic",
    )

    subparsers.add_parser("kinds", help="List the registered trade kinds")

    return parser.parse_args(argv)


def list_kinds() -> NoReturn:
    """Print the built-in trade kinds and exit."""
    service = TradeReloadService()
    service.register_defaults()

    print("Registered trade kinds:")
    for kind in service.registry.available_kinds():
        print(f"  {kind}")
    sys.exit(0)


def run_check(
    catalog_dir: Path,
    namespace: str = "minecraft",
    summary_only: bool = False,
) -> NoReturn:
    """Load every catalog in ``catalog_dir`` and print the diagnostics.

    Raises:
        SystemExit: 0 when no diagnostics were produced, 1 when there were
            diagnostics, 2 when the arguments are unusable.
    """
    logger = logging.getLogger(__name__)

    try:
        settings = LoaderSettings(default_namespace=namespace)
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        print(f"Invalid namespace '{namespace}'", file=sys.stderr)
        sys.exit(2)

    source = CatalogDirectorySource(catalog_dir, settings)
    host = InMemoryTradeRegistry()
    service = TradeReloadService(settings=settings)
    service.register_defaults()

    try:
        summary = service.reload_from(source, host)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)

    diagnostics = len(service.sink)
    service.flush_diagnostics([ConsoleAudience(show_details=not summary_only)])

    print(
        f"Loaded {summary.registered} trade(s) from {summary.documents} "
        f"catalog(s); {diagnostics} problem(s) found"
    )
    sys.exit(1 if diagnostics else 0)


def main(argv: list[str] | None = None) -> NoReturn:
    args = parse_arguments(argv)
    configure_logging(args.debug, args.verbose)

    if args.command == "kinds":
        list_kinds()

    run_check(args.catalog_dir, args.namespace, args.summary_only)


if __name__ == "__main__":
    main()
