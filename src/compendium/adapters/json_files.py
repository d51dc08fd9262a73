"""JSON file adapter: read legacy extracts and write migration outputs.

The migration engine itself never touches the file system; this adapter is the
boundary used by the command-line runner.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, is_dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from pathlib import Path

    from compendium.domain.migration import MigrationResult


log = getLogger(__name__)

COMPENDIUM_FILENAME: Final[str] = "compendium.json"
ECONOMICS_FILENAME: Final[str] = "economics.json"
REPORT_FILENAME: Final[str] = "migration_report.json"

COMPENDIUM_COLLECTIONS: Final[tuple[str, ...]] = (
    "items",
    "animals",
    "waypoint_nodes",
    "waypoint_routes",
    "collectible_entries",
    "roles",
)
ECONOMICS_COLLECTIONS: Final[tuple[str, ...]] = ("formulas",)


class ExtractLoadError(RuntimeError):
    """Raised when a legacy extract cannot be read as a JSON object."""


@dataclass(frozen=True, slots=True)
class OutputPaths:
    compendium: Path
    economics: Path
    report: Path


def load_extract(path: Path) -> dict[str, Any]:
    """Read the legacy extract at ``path``; the top level must be a JSON object."""

    if not path.is_file():
        raise ExtractLoadError(f"Input file not found: {path}")
    try:
        with path.open(encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ExtractLoadError(f"Failed to parse input file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ExtractLoadError(f"Input file {path} must contain a JSON object")
    log.info("Loaded extract %s (%s top-level keys)", path, len(payload))
    return payload


def to_jsonable(value: object) -> Any:
    """Convert dataclasses (recursively) to plain dicts for ``json.dump``.

    Enums are ``StrEnum`` members and tuples serialise as arrays, so nothing
    else needs converting.
    """

    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    return value


def write_outputs(result: MigrationResult, output_dir: Path) -> OutputPaths:
    """Write compendium, economics and report files into ``output_dir``."""

    output_dir.mkdir(parents=True, exist_ok=True)
    paths = OutputPaths(
        compendium=output_dir / COMPENDIUM_FILENAME,
        economics=output_dir / ECONOMICS_FILENAME,
        report=output_dir / REPORT_FILENAME,
    )
    _dump(paths.compendium, _collections(result, COMPENDIUM_COLLECTIONS))
    _dump(paths.economics, _collections(result, ECONOMICS_COLLECTIONS))
    _dump(paths.report, to_jsonable(result.report))
    log.info("Wrote migration outputs to %s", output_dir)
    return paths


def _collections(result: MigrationResult, names: tuple[str, ...]) -> dict[str, Any]:
    return {name: to_jsonable(getattr(result, name)) for name in names}


def _dump(path: Path, payload: object) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)
        handle.write("\n")
