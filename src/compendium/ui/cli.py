from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from compendium.adapters.json_files import ExtractLoadError, load_extract, write_outputs
from compendium.config import ConfigurationError, configure_logging, get_paths_config
from compendium.domain.migration import migrate

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from compendium.domain.migration import MigrationReport

log = logging.getLogger(__name__)

DEFAULT_MAX_LISTED = 5


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Migrate a legacy game-data extract into the versioned compendium"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Extract file (defaults to COMPENDIUM_INPUT_FILE under the data dir)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the output files (defaults to <data dir>/v3)",
    )
    parser.add_argument(
        "--max-listed",
        type=int,
        default=DEFAULT_MAX_LISTED,
        help="Number of errors, warnings and gaps to print per category",
    )
    args = parser.parse_args(list(argv))
    if args.max_listed < 0:
        parser.error("--max-listed must be non-negative")
    return args


def _log_findings(title: str, messages: Sequence[str], *, limit: int, level: int) -> None:
    if not messages:
        return
    log.log(level, "%s (%s):", title, len(messages))
    for message in messages[:limit]:
        log.log(level, "  - %s", message)
    if len(messages) > limit:
        log.log(level, "  ... and %s more", len(messages) - limit)


def _log_report(report: MigrationReport, *, limit: int) -> None:
    for line in report.summary.splitlines():
        log.info(line)
    stats = report.stats
    log.info(
        "Statistics: items=%s, formulas=%s, animals=%s, waypoint_nodes=%s, "
        "waypoint_routes=%s, collectible_entries=%s, roles=%s",
        stats.items_migrated,
        stats.formulas_migrated,
        stats.animals_migrated,
        stats.waypoint_nodes_migrated,
        stats.waypoint_routes_migrated,
        stats.collectible_entries_migrated,
        stats.roles_migrated,
    )
    _log_findings("Errors", report.errors, limit=limit, level=logging.ERROR)
    _log_findings("Warnings", report.warnings, limit=limit, level=logging.WARNING)
    _log_findings("Data gaps", report.gaps, limit=limit, level=logging.INFO)


def main(argv: Sequence[str] | None = None) -> None:
    """Run one migration from the extract file to the output directory."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        configure_logging()
        paths = get_paths_config()
        input_path = paths.input_path(parsed_args.input)
        output_dir = parsed_args.output_dir or paths.resolve_output_dir()
        raw_input = load_extract(input_path)
    except (ConfigurationError, ExtractLoadError):
        log.exception("Cannot start migration")
        sys.exit(2)

    log.info("Migrating %s", input_path)
    result = migrate(raw_input)

    try:
        written = write_outputs(result, output_dir)
    except OSError:
        log.exception("Failed to write migration outputs")
        sys.exit(1)

    _log_report(result.report, limit=parsed_args.max_listed)
    log.info("Compendium written to %s", written.compendium)
    log.info("Economics written to %s", written.economics)
    log.info("Report written to %s", written.report)

    if not result.report.success:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()
