"""Orchestrator for migrating a legacy extract into the compendium model.

Each domain collection is folded on its own into a ``DomainOutcome`` (map),
then the outcomes are merged in a fixed domain order (reduce). Running the map
step on an executor therefore yields the same result as running it inline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Any, Final

from compendium.domain.model.enums import EntityType

from .migrators import MIGRATORS
from .records import ConfidenceTally, Diagnostics, DomainOutcome, migrate_records
from .report import MigrationReport, MigrationStats, build_report, failed_report
from .schema import LegacyExtract

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from concurrent.futures import Executor

    from compendium.domain.model.entities import (
        Animal,
        CollectibleEntry,
        Formula,
        Item,
        Role,
        TrackedEntity,
        WaypointNode,
        WaypointRoute,
    )

    from .records import RecordMigrator


log = getLogger(__name__)

DOMAIN_ORDER: Final[tuple[EntityType, ...]] = (
    EntityType.ITEM,
    EntityType.FORMULA,
    EntityType.ANIMAL,
    EntityType.WAYPOINT_NODE,
    EntityType.WAYPOINT_ROUTE,
    EntityType.COLLECTIBLE_ENTRY,
    EntityType.ROLE,
)

# Collection name shared by ``LegacyExtract`` and ``MigrationResult``.
COLLECTION_FIELDS: Final[Mapping[EntityType, str]] = {
    EntityType.ITEM: "items",
    EntityType.FORMULA: "formulas",
    EntityType.ANIMAL: "animals",
    EntityType.WAYPOINT_NODE: "waypoint_nodes",
    EntityType.WAYPOINT_ROUTE: "waypoint_routes",
    EntityType.COLLECTIBLE_ENTRY: "collectible_entries",
    EntityType.ROLE: "roles",
}

STATS_FIELDS: Final[Mapping[EntityType, str]] = {
    EntityType.ITEM: "items_migrated",
    EntityType.FORMULA: "formulas_migrated",
    EntityType.ANIMAL: "animals_migrated",
    EntityType.WAYPOINT_NODE: "waypoint_nodes_migrated",
    EntityType.WAYPOINT_ROUTE: "waypoint_routes_migrated",
    EntityType.COLLECTIBLE_ENTRY: "collectible_entries_migrated",
    EntityType.ROLE: "roles_migrated",
}

FATAL_PREFIX: Final[str] = "Critical migration failure"


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True, kw_only=True)
class MigrationResult:
    """Id-keyed output collections of one run plus its report."""

    report: MigrationReport
    items: dict[str, Item] = field(default_factory=dict[str, "Item"])
    formulas: dict[str, Formula] = field(default_factory=dict[str, "Formula"])
    animals: dict[str, Animal] = field(default_factory=dict[str, "Animal"])
    waypoint_nodes: dict[str, WaypointNode] = field(default_factory=dict[str, "WaypointNode"])
    waypoint_routes: dict[str, WaypointRoute] = field(default_factory=dict[str, "WaypointRoute"])
    collectible_entries: dict[str, CollectibleEntry] = field(
        default_factory=dict[str, "CollectibleEntry"]
    )
    roles: dict[str, Role] = field(default_factory=dict[str, "Role"])

    def collection(self, entity_type: EntityType) -> Mapping[str, TrackedEntity]:
        return getattr(self, COLLECTION_FIELDS[entity_type])


type _DomainJob = tuple[RecordMigrator[Any, TrackedEntity], Sequence[object], str]


def _migrate_domain(job: _DomainJob) -> DomainOutcome[Any]:
    """Fold one collection. Kept module-level so process pools can pickle it."""

    migrator, records, run_date = job
    return migrate_records(migrator, records, run_date=run_date)


@dataclass(slots=True, kw_only=True)
class LegacyMigrator:
    """Run all domain migrators over a raw extract and assemble the report.

    ``clock`` is read once per run; it supplies the report timestamp and the
    default ``last_verified`` date. ``executor`` optionally runs the per-domain
    folds concurrently.
    """

    clock: Callable[[], datetime] = _utcnow
    executor: Executor | None = None
    migrators: Mapping[EntityType, RecordMigrator[Any, TrackedEntity]] = field(
        default_factory=lambda: MIGRATORS
    )

    def run(self, raw_input: object) -> MigrationResult:
        now = self.clock()
        timestamp = now.isoformat()
        try:
            return self._run(raw_input, run_date=now.date().isoformat(), timestamp=timestamp)
        except Exception as exc:
            # Partial work is discarded; only the fatal error survives.
            log.exception("Migration aborted")
            return MigrationResult(
                report=failed_report(timestamp=timestamp, error=f"{FATAL_PREFIX}: {exc}")
            )

    def _run(self, raw_input: object, *, run_date: str, timestamp: str) -> MigrationResult:
        extract = LegacyExtract.model_validate(raw_input)
        jobs: list[_DomainJob] = []
        for entity_type in DOMAIN_ORDER:
            records = getattr(extract, COLLECTION_FIELDS[entity_type])
            if records is not None:
                jobs.append((self.migrators[entity_type], records, run_date))

        outcomes = self._map(jobs)
        return self._reduce(outcomes, timestamp=timestamp)

    def _map(self, jobs: Sequence[_DomainJob]) -> list[DomainOutcome[Any]]:
        if self.executor is None:
            return [_migrate_domain(job) for job in jobs]
        return list(self.executor.map(_migrate_domain, jobs))

    def _reduce(
        self, outcomes: Sequence[DomainOutcome[Any]], *, timestamp: str
    ) -> MigrationResult:
        diagnostics = Diagnostics()
        tally = ConfidenceTally()
        collections: dict[str, dict[str, Any]] = {}
        counts: dict[str, int] = {}
        for outcome in outcomes:
            diagnostics.extend(outcome.diagnostics)
            tally.merge(outcome.tally)
            collections[COLLECTION_FIELDS[outcome.entity_type]] = outcome.entities
            counts[STATS_FIELDS[outcome.entity_type]] = len(outcome.entities)

        stats = MigrationStats(
            **counts,
            high_confidence_count=tally.high,
            medium_confidence_count=tally.medium,
            low_confidence_count=tally.low,
        )
        report = build_report(
            stats=stats,
            timestamp=timestamp,
            errors=diagnostics.errors,
            warnings=diagnostics.warnings,
            gaps=diagnostics.gaps,
        )
        log.info(
            "Migration finished: success=%s, migrated=%s, errors=%s, warnings=%s, gaps=%s",
            report.success,
            stats.total_migrated,
            len(report.errors),
            len(report.warnings),
            len(report.gaps),
        )
        return MigrationResult(report=report, **collections)


def migrate(
    raw_input: object,
    *,
    clock: Callable[[], datetime] | None = None,
    executor: Executor | None = None,
) -> MigrationResult:
    """Migrate a raw legacy extract. Never raises for bad input; see ``report``."""

    migrator = LegacyMigrator(clock=clock or _utcnow, executor=executor)
    return migrator.run(raw_input)
