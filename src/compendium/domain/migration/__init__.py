"""Legacy extract migration: validation, confidence scoring and reporting.

The engine is a pure function of its input. ``migrate`` never raises for bad
records; every problem surfaces as an error, warning or gap on the report.
"""

from __future__ import annotations

from .defaults import DEFAULTS, default_for
from .migrators import (
    MIGRATORS,
    AnimalMigrator,
    CollectibleEntryMigrator,
    FormulaMigrator,
    ItemMigrator,
    RoleMigrator,
    WaypointNodeMigrator,
    WaypointRouteMigrator,
)
from .orchestrator import LegacyMigrator, MigrationResult, migrate
from .records import ConfidenceTally, Diagnostics, DomainOutcome, RecordContext, Severity
from .report import MigrationReport, MigrationStats, build_report, summarize
from .validation import sanitize_sources, validate_source_reference

__all__ = [
    "DEFAULTS",
    "MIGRATORS",
    "AnimalMigrator",
    "CollectibleEntryMigrator",
    "ConfidenceTally",
    "Diagnostics",
    "DomainOutcome",
    "FormulaMigrator",
    "ItemMigrator",
    "LegacyMigrator",
    "MigrationReport",
    "MigrationResult",
    "MigrationStats",
    "RecordContext",
    "RoleMigrator",
    "Severity",
    "WaypointNodeMigrator",
    "WaypointRouteMigrator",
    "build_report",
    "default_for",
    "migrate",
    "sanitize_sources",
    "summarize",
    "validate_source_reference",
]
