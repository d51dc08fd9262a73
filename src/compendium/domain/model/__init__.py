"""Compendium domain model: provenance, confidence and migrated entities."""

from __future__ import annotations

from .confidence import infer_confidence
from .entities import (
    Animal,
    CollectibleEntry,
    Formula,
    Item,
    ItemPrice,
    MigratedEntity,
    Role,
    TrackedEntity,
    WaypointNode,
    WaypointRoute,
)
from .enums import Confidence, EntityType, SourceKind
from .facts import VersionedFact
from .provenance import SourceReference

__all__ = [
    "Animal",
    "CollectibleEntry",
    "Confidence",
    "EntityType",
    "Formula",
    "Item",
    "ItemPrice",
    "MigratedEntity",
    "Role",
    "SourceKind",
    "SourceReference",
    "TrackedEntity",
    "VersionedFact",
    "WaypointNode",
    "WaypointRoute",
    "infer_confidence",
]
