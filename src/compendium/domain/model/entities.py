"""
Migrated compendium entities.

Every entity carries the aggregate confidence of its facts together with the
sources it was inferred from. Entities are built once per migration run and
never mutated afterwards.

Fields are frozen, but mapping-valued fields (``Item.stats``,
``Formula.optimal_parameters``) hold plain dicts owned by the entity: they must
stay picklable for process pools and serialisable through ``dataclasses.asdict``.
Treat them as read-only. Entities compare by value; hashing is not supported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from compendium.domain.model.confidence import infer_confidence
from compendium.domain.model.enums import EntityType

if TYPE_CHECKING:
    from compendium.domain.model.enums import Confidence
    from compendium.domain.model.facts import VersionedFact
    from compendium.domain.model.provenance import SourceReference


@dataclass(frozen=True, slots=True, kw_only=True)
class TrackedEntity:
    """Identity plus provenance shared by all migrated entities."""

    id: str
    confidence: Confidence
    sources: tuple[SourceReference, ...] = field(default=())
    last_verified: str

    # class-level discriminator; subclasses must override
    ENTITY_TYPE: ClassVar[EntityType]

    def __post_init__(self) -> None:
        expected = infer_confidence(self.sources)
        if self.confidence is not expected:
            raise ValueError(
                f"{self.ENTITY_TYPE} {self.id}: confidence {self.confidence} "
                f"does not match sources (expected {expected})"
            )

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemPrice:
    cash: VersionedFact[float] | None = None
    gold: VersionedFact[float] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Item(TrackedEntity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ITEM

    name: str
    category: str
    shop: str
    price: ItemPrice
    rarity: str | None = None
    description: str | None = None
    item_type: str | None = None
    stats: dict[str, float] | None = None
    patch_version: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Formula(TrackedEntity):
    """An economic formula, keyed by the system it belongs to."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.FORMULA

    system: str
    name: str | None = None
    formula: str
    description: str | None = None
    variables: tuple[Any, ...] = ()
    optimal_parameters: dict[str, Any] | None = None
    examples: tuple[Any, ...] = ()
    patch_version: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Animal(TrackedEntity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ANIMAL

    name: str
    species: str
    size: str
    ai_rating: VersionedFact[float]
    health: VersionedFact[float]
    materials: tuple[Any, ...] = ()
    spawns: tuple[Any, ...] = ()
    can_study: bool = False
    patch_version: str


@dataclass(frozen=True, slots=True, kw_only=True)
class WaypointNode(TrackedEntity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.WAYPOINT_NODE

    name: str
    latitude: VersionedFact[float]
    longitude: VersionedFact[float]
    region: str
    cost_cash: VersionedFact[float]


@dataclass(frozen=True, slots=True, kw_only=True)
class WaypointRoute(TrackedEntity):
    """Directed travel leg between two waypoint nodes."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.WAYPOINT_ROUTE

    from_id: str
    to_id: str
    distance_miles: VersionedFact[float]
    travel_time_seconds: VersionedFact[float]
    cost_cash: VersionedFact[float]
    asymmetric: bool = False

    @staticmethod
    def route_id(from_id: str, to_id: str) -> str:
        return f"{from_id}_to_{to_id}"


@dataclass(frozen=True, slots=True, kw_only=True)
class CollectibleEntry(TrackedEntity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.COLLECTIBLE_ENTRY

    collection_set_id: str
    cycle: VersionedFact[int]
    name: str | None = None
    description: str | None = None
    latitude: VersionedFact[float]
    longitude: VersionedFact[float]
    region: str
    cash_value: VersionedFact[float]
    patch_version: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Role(TrackedEntity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ROLE

    name: str
    mentor_npc: str | None = None
    unlock_cost_gold: VersionedFact[float]
    player_rank_required: VersionedFact[int]
    max_rank: VersionedFact[int]
    rank_benefits: tuple[Any, ...] = ()


type MigratedEntity = (
    Item | Formula | Animal | WaypointNode | WaypointRoute | CollectibleEntry | Role
)
