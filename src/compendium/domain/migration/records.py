"""Shared per-record migration skeleton and per-domain bookkeeping.

Each domain migrator plugs its schema, identity fields and ``build`` step into
``RecordMigrator``. Diagnostics and confidence counters are local to one domain
run (``RecordContext``); the orchestrator merges them afterwards, so domains
never share mutable state.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sized
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Any, ClassVar, cast

from pydantic import AliasChoices, ValidationError

from compendium.domain.model.confidence import infer_confidence
from compendium.domain.model.enums import Confidence, EntityType
from compendium.domain.model.facts import VersionedFact

from .defaults import RUN_DATE, default_for
from .schema import LegacyBaseModel
from .validation import sanitize_sources

if TYPE_CHECKING:
    from collections.abc import Iterable

    from compendium.domain.model.entities import TrackedEntity
    from compendium.domain.model.provenance import SourceReference


log = getLogger(__name__)

PREVIEW_LENGTH = 100


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(slots=True)
class Diagnostics:
    """Errors, warnings and data gaps collected while migrating records."""

    errors: list[str] = field(default_factory=list[str])
    warnings: list[str] = field(default_factory=list[str])
    gaps: list[str] = field(default_factory=list[str])

    def record(self, severity: Severity, message: str) -> None:
        if severity is Severity.ERROR:
            self.errors.append(message)
        else:
            self.warnings.append(message)

    def extend(self, other: Diagnostics) -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.gaps.extend(other.gaps)


@dataclass(slots=True)
class ConfidenceTally:
    high: int = 0
    medium: int = 0
    low: int = 0

    def record(self, confidence: Confidence) -> None:
        if confidence is Confidence.HIGH:
            self.high += 1
        elif confidence is Confidence.MEDIUM:
            self.medium += 1
        else:
            self.low += 1

    def merge(self, other: ConfidenceTally) -> None:
        self.high += other.high
        self.medium += other.medium
        self.low += other.low


@dataclass(slots=True, kw_only=True)
class RecordContext:
    """Domain-local state threaded through every record of one collection."""

    run_date: str
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    tally: ConfidenceTally = field(default_factory=ConfidenceTally)


@dataclass(frozen=True, slots=True, kw_only=True)
class FactStamp:
    """Provenance shared by a record and every fact built from it."""

    sources: tuple[SourceReference, ...]
    confidence: Confidence
    last_verified: str
    patch_version: str | None = None

    def fact[T](self, value: T) -> VersionedFact[T]:
        return VersionedFact(
            value=value,
            confidence=self.confidence,
            sources=self.sources,
            last_verified=self.last_verified,
            patch_version=self.patch_version,
        )


@dataclass(slots=True)
class DomainOutcome[TEntity: TrackedEntity]:
    """Result of folding one raw collection: id-keyed entities plus bookkeeping."""

    entity_type: EntityType
    entities: dict[str, TEntity] = field(default_factory=dict[str, Any])
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    tally: ConfidenceTally = field(default_factory=ConfidenceTally)


def preview(raw: object) -> str:
    """Truncated JSON rendering of a raw record for diagnostics."""

    try:
        rendered = json.dumps(raw, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        rendered = repr(raw)
    return rendered[:PREVIEW_LENGTH]


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _has_entries(value: object) -> bool:
    return isinstance(value, Sized) and len(value) > 0


class RecordMigrator[TRecord: LegacyBaseModel, TEntity: TrackedEntity](ABC):
    """Template for migrating one raw legacy record into one entity."""

    entity_type: ClassVar[EntityType]
    label: ClassVar[str]
    schema: ClassVar[type[LegacyBaseModel]]
    identity_fields: ClassVar[tuple[str, ...]]
    missing_identity: ClassVar[Severity] = Severity.ERROR
    carries_patch_version: ClassVar[bool] = True

    def migrate(self, raw: object, *, context: RecordContext) -> TEntity | None:
        """Return the migrated entity, or ``None`` after recording why not."""

        identity = self._identity_values(raw)
        if identity is None or any(_is_blank(value) for value in identity.values()):
            context.diagnostics.record(
                self.missing_identity,
                f"{self.label} missing {' or '.join(self.identity_fields)}: {preview(raw)}",
            )
            return None
        payload = cast("Mapping[str, Any]", raw)

        try:
            record = cast("TRecord", self.schema.model_validate(payload))
        except ValidationError as exc:
            locations = ", ".join(
                ".".join(str(part) for part in error["loc"]) for error in exc.errors()
            )
            context.diagnostics.errors.append(
                f"Failed to migrate {self.label.lower()} {self._describe(payload, identity)}: "
                f"{exc.error_count()} invalid field(s) ({locations})"
            )
            return None

        key = self.record_key(record)
        raw_sources = payload.get("sources")
        sources = sanitize_sources(raw_sources)
        if _has_entries(raw_sources) and not sources:
            context.diagnostics.warnings.append(
                f"{self.label} {key}: Invalid source references found, proceeding with none"
            )

        confidence = infer_confidence(sources)
        context.tally.record(confidence)
        if confidence is Confidence.LOW:
            context.diagnostics.gaps.append(
                f"{self.label} {key}: Low confidence, needs verification"
            )

        stamp = FactStamp(
            sources=sources,
            confidence=confidence,
            last_verified=cast("str", self.value_or_default(record, "last_verified", context)),
            patch_version=(
                cast("str", self.value_or_default(record, "patch_version", context))
                if self.carries_patch_version
                else None
            ),
        )
        return self.build(record, key=key, stamp=stamp, context=context)

    @abstractmethod
    def build(
        self, record: TRecord, *, key: str, stamp: FactStamp, context: RecordContext
    ) -> TEntity: ...

    def record_key(self, record: TRecord) -> str:
        """Key under which the entity is stored; the record ``id`` by default."""

        return str(record.id)

    def value_or_default(self, record: TRecord, name: str, context: RecordContext) -> Any:
        """Return the record value, or the fixed default when it is absent."""

        value = getattr(record, name)
        if value is None:
            value = default_for(self.entity_type, name)
            if value is RUN_DATE:
                return context.run_date
        if isinstance(value, list):
            return tuple(cast("list[Any]", value))
        return value

    def _identity_values(self, raw: object) -> dict[str, object] | None:
        if not isinstance(raw, Mapping):
            return None
        mapping = cast("Mapping[str, object]", raw)
        return {name: self._read_field(mapping, name) for name in self.identity_fields}

    def _read_field(self, raw: Mapping[str, object], name: str) -> object:
        for key in self._field_keys(name):
            if key in raw:
                return raw[key]
        return None

    def _field_keys(self, name: str) -> tuple[str, ...]:
        alias = self.schema.model_fields[name].validation_alias
        if isinstance(alias, AliasChoices):
            return tuple(choice for choice in alias.choices if isinstance(choice, str))
        if isinstance(alias, str):
            return (alias,)
        return (name,)

    def _describe(self, raw: Mapping[str, Any], identity: dict[str, object]) -> str:
        raw_id = raw.get("id")
        if not _is_blank(raw_id):
            return str(raw_id)
        return "/".join(str(value) for value in identity.values())


def migrate_records[TEntity: TrackedEntity](
    migrator: RecordMigrator[Any, TEntity],
    records: Iterable[object],
    *,
    run_date: str,
) -> DomainOutcome[TEntity]:
    """Fold ``records`` into one ``DomainOutcome``; one bad record never stops the loop.

    Later records win on id collisions.
    """

    context = RecordContext(run_date=run_date)
    outcome: DomainOutcome[TEntity] = DomainOutcome(
        entity_type=migrator.entity_type,
        diagnostics=context.diagnostics,
        tally=context.tally,
    )
    for raw in records:
        entity = migrator.migrate(raw, context=context)
        if entity is not None:
            outcome.entities[entity.id] = entity

    log.debug(
        "Migrated %s: kept=%s, errors=%s, warnings=%s, gaps=%s",
        migrator.entity_type,
        len(outcome.entities),
        len(outcome.diagnostics.errors),
        len(outcome.diagnostics.warnings),
        len(outcome.diagnostics.gaps),
    )
    return outcome
