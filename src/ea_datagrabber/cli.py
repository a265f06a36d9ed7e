"""Command-line entry point for the EA data grabber."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .client import DataGrabberClient
from .config import Config
from .console import DataGrabberConsole
from .logging_utils import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ea-datagrabber",
        description="Find and download Electricity Authority dataset files",
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the YAML configuration file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Directory to save downloaded files (overrides the config)",
    )
    parser.add_argument(
        "--query",
        help='Run one search without the menu, e.g. "Datasets/Wholesale -sd 2023-01-01"',
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="With --query, download the matches without asking",
    )
    parser.add_argument(
        "--list-only",
        action="store_true",
        help="With --query, only print the matching files",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def run_query(console: DataGrabberConsole, query: str, assume_yes: bool, list_only: bool) -> int:
    """One-shot search and download. Returns the process exit status."""
    _, _, records = console.client.search(query)
    if not records:
        console.info(f"No containers matching the input: {query}")
        return 0

    console.print_records(records)
    if list_only:
        return 0

    if not assume_yes:
        answer = console.prompt("Download all of the above files? (y / n): ")
        if answer.strip().lower() != "y":
            return 0

    summary = console.client.download_batch(records, console.output_dir)
    console.print_summary(summary)
    return 1 if summary.failed or summary.skipped else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    config = Config.load(args.config)
    if args.output is not None:
        config.paths.output_dir = args.output
    config.ensure_directories()

    with DataGrabberClient(config.listing) as client:
        console = DataGrabberConsole(client, config.paths.output_dir)
        if args.query:
            return run_query(console, args.query, args.yes, args.list_only)
        console.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
