"""Migration statistics, report assembly and the human-readable summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True, slots=True, kw_only=True)
class MigrationStats:
    items_migrated: int = 0
    formulas_migrated: int = 0
    animals_migrated: int = 0
    waypoint_nodes_migrated: int = 0
    waypoint_routes_migrated: int = 0
    collectible_entries_migrated: int = 0
    roles_migrated: int = 0
    high_confidence_count: int = 0
    medium_confidence_count: int = 0
    low_confidence_count: int = 0

    @property
    def total_migrated(self) -> int:
        return (
            self.items_migrated
            + self.formulas_migrated
            + self.animals_migrated
            + self.waypoint_nodes_migrated
            + self.waypoint_routes_migrated
            + self.collectible_entries_migrated
            + self.roles_migrated
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class MigrationReport:
    """Outcome of one run. ``success`` holds exactly when ``errors`` is empty."""

    success: bool
    timestamp: str
    stats: MigrationStats = field(default_factory=MigrationStats)
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()
    gaps: tuple[str, ...] = ()
    summary: str = ""

    def __post_init__(self) -> None:
        if self.success != (not self.errors):
            raise ValueError("report success must be true exactly when there are no errors")


def summarize(
    stats: MigrationStats,
    errors: Sequence[str],
    warnings: Sequence[str],
    gaps: Sequence[str],
) -> str:
    """Render the multi-line run summary. Same input, same string."""

    lines = [
        "MIGRATION COMPLETE",
        (
            f"Migrated {stats.total_migrated} total entries ("
            f"{stats.items_migrated} items, "
            f"{stats.formulas_migrated} formulas, "
            f"{stats.animals_migrated} animals, "
            f"{stats.waypoint_nodes_migrated} waypoint nodes, "
            f"{stats.waypoint_routes_migrated} waypoint routes, "
            f"{stats.collectible_entries_migrated} collectible entries, "
            f"{stats.roles_migrated} roles)"
        ),
        (
            f"Confidence: {stats.high_confidence_count} HIGH, "
            f"{stats.medium_confidence_count} MEDIUM, "
            f"{stats.low_confidence_count} LOW"
        ),
    ]
    if errors:
        lines.append(f"{len(errors)} errors found")
    if warnings:
        lines.append(f"{len(warnings)} warnings")
    if gaps:
        lines.append(f"{len(gaps)} data gaps (unverified entries)")
    return "\n".join(lines)


def build_report(
    *,
    stats: MigrationStats,
    timestamp: str,
    errors: Sequence[str],
    warnings: Sequence[str],
    gaps: Sequence[str],
) -> MigrationReport:
    return MigrationReport(
        success=not errors,
        timestamp=timestamp,
        stats=stats,
        warnings=tuple(warnings),
        errors=tuple(errors),
        gaps=tuple(gaps),
        summary=summarize(stats, errors, warnings, gaps),
    )


def failed_report(*, timestamp: str, error: str) -> MigrationReport:
    """Report for a run aborted by an unexpected failure; all counters are zero."""

    return MigrationReport(
        success=False,
        timestamp=timestamp,
        errors=(error,),
        summary=f"FAILED: {error}",
    )
