"""Per-domain record migrators.

Catalog, economic, animal, collectible and role data are load-bearing: a record
missing its identity is an error. Way-point geography is supplementary, so the
same defect on nodes and routes is only a warning.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Final

from compendium.domain.model.entities import (
    Animal,
    CollectibleEntry,
    Formula,
    Item,
    ItemPrice,
    Role,
    WaypointNode,
    WaypointRoute,
)
from compendium.domain.model.enums import EntityType

from .records import RecordMigrator, Severity
from .schema import (
    LegacyAnimal,
    LegacyCollectibleEntry,
    LegacyFormula,
    LegacyItem,
    LegacyRole,
    LegacyWaypointNode,
    LegacyWaypointRoute,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from compendium.domain.model.entities import TrackedEntity

    from .records import FactStamp, RecordContext


class ItemMigrator(RecordMigrator[LegacyItem, Item]):
    entity_type: ClassVar[EntityType] = EntityType.ITEM
    label: ClassVar[str] = "Item"
    schema = LegacyItem
    identity_fields: ClassVar[tuple[str, ...]] = ("id", "name")

    def build(
        self, record: LegacyItem, *, key: str, stamp: FactStamp, context: RecordContext
    ) -> Item:
        # Prices stay unset when the extract has none; there is no default price.
        return Item(
            id=key,
            name=str(record.name),
            category=self.value_or_default(record, "category", context),
            shop=self.value_or_default(record, "shop", context),
            price=ItemPrice(
                cash=stamp.fact(record.price) if record.price is not None else None,
                gold=stamp.fact(record.gold_price) if record.gold_price is not None else None,
            ),
            rarity=record.rarity,
            description=record.description,
            item_type=record.type,
            stats=dict(record.stats) if record.stats is not None else None,
            confidence=stamp.confidence,
            sources=stamp.sources,
            last_verified=stamp.last_verified,
            patch_version=str(stamp.patch_version),
        )


class FormulaMigrator(RecordMigrator[LegacyFormula, Formula]):
    entity_type: ClassVar[EntityType] = EntityType.FORMULA
    label: ClassVar[str] = "Formula"
    schema = LegacyFormula
    identity_fields: ClassVar[tuple[str, ...]] = ("id", "system")

    def build(
        self, record: LegacyFormula, *, key: str, stamp: FactStamp, context: RecordContext
    ) -> Formula:
        return Formula(
            id=key,
            system=str(record.system),
            name=record.name,
            formula=self.value_or_default(record, "formula", context),
            description=record.description,
            variables=self.value_or_default(record, "variables", context),
            optimal_parameters=(
                dict(record.optimal_parameters)
                if record.optimal_parameters is not None
                else None
            ),
            examples=self.value_or_default(record, "examples", context),
            confidence=stamp.confidence,
            sources=stamp.sources,
            last_verified=stamp.last_verified,
            patch_version=str(stamp.patch_version),
        )


class AnimalMigrator(RecordMigrator[LegacyAnimal, Animal]):
    entity_type: ClassVar[EntityType] = EntityType.ANIMAL
    label: ClassVar[str] = "Animal"
    schema = LegacyAnimal
    identity_fields: ClassVar[tuple[str, ...]] = ("id", "name")

    def build(
        self, record: LegacyAnimal, *, key: str, stamp: FactStamp, context: RecordContext
    ) -> Animal:
        return Animal(
            id=key,
            name=str(record.name),
            species=self.value_or_default(record, "species", context),
            size=self.value_or_default(record, "size", context),
            ai_rating=stamp.fact(self.value_or_default(record, "ai_rating", context)),
            health=stamp.fact(self.value_or_default(record, "health", context)),
            materials=self.value_or_default(record, "materials", context),
            spawns=self.value_or_default(record, "spawns", context),
            can_study=self.value_or_default(record, "can_study", context),
            confidence=stamp.confidence,
            sources=stamp.sources,
            last_verified=stamp.last_verified,
            patch_version=str(stamp.patch_version),
        )


class WaypointNodeMigrator(RecordMigrator[LegacyWaypointNode, WaypointNode]):
    entity_type: ClassVar[EntityType] = EntityType.WAYPOINT_NODE
    label: ClassVar[str] = "Waypoint node"
    schema = LegacyWaypointNode
    identity_fields: ClassVar[tuple[str, ...]] = ("id", "name")
    missing_identity: ClassVar[Severity] = Severity.WARNING
    carries_patch_version: ClassVar[bool] = False

    def build(
        self, record: LegacyWaypointNode, *, key: str, stamp: FactStamp, context: RecordContext
    ) -> WaypointNode:
        return WaypointNode(
            id=key,
            name=str(record.name),
            latitude=stamp.fact(self.value_or_default(record, "latitude", context)),
            longitude=stamp.fact(self.value_or_default(record, "longitude", context)),
            region=self.value_or_default(record, "region", context),
            cost_cash=stamp.fact(self.value_or_default(record, "cost_cash", context)),
            confidence=stamp.confidence,
            sources=stamp.sources,
            last_verified=stamp.last_verified,
        )


class WaypointRouteMigrator(RecordMigrator[LegacyWaypointRoute, WaypointRoute]):
    entity_type: ClassVar[EntityType] = EntityType.WAYPOINT_ROUTE
    label: ClassVar[str] = "Waypoint route"
    schema = LegacyWaypointRoute
    identity_fields: ClassVar[tuple[str, ...]] = ("from_id", "to_id")
    missing_identity: ClassVar[Severity] = Severity.WARNING
    carries_patch_version: ClassVar[bool] = False

    def record_key(self, record: LegacyWaypointRoute) -> str:
        if record.id:
            return record.id
        return WaypointRoute.route_id(str(record.from_id), str(record.to_id))

    def build(
        self, record: LegacyWaypointRoute, *, key: str, stamp: FactStamp, context: RecordContext
    ) -> WaypointRoute:
        return WaypointRoute(
            id=key,
            from_id=str(record.from_id),
            to_id=str(record.to_id),
            distance_miles=stamp.fact(self.value_or_default(record, "distance_miles", context)),
            travel_time_seconds=stamp.fact(
                self.value_or_default(record, "travel_time_seconds", context)
            ),
            cost_cash=stamp.fact(self.value_or_default(record, "cost_cash", context)),
            asymmetric=self.value_or_default(record, "asymmetric", context),
            confidence=stamp.confidence,
            sources=stamp.sources,
            last_verified=stamp.last_verified,
        )


class CollectibleEntryMigrator(RecordMigrator[LegacyCollectibleEntry, CollectibleEntry]):
    entity_type: ClassVar[EntityType] = EntityType.COLLECTIBLE_ENTRY
    label: ClassVar[str] = "Collectible entry"
    schema = LegacyCollectibleEntry
    identity_fields: ClassVar[tuple[str, ...]] = ("id", "collection_set_id")

    def build(
        self,
        record: LegacyCollectibleEntry,
        *,
        key: str,
        stamp: FactStamp,
        context: RecordContext,
    ) -> CollectibleEntry:
        return CollectibleEntry(
            id=key,
            collection_set_id=str(record.collection_set_id),
            cycle=stamp.fact(self.value_or_default(record, "cycle", context)),
            name=record.name,
            description=record.description,
            latitude=stamp.fact(self.value_or_default(record, "latitude", context)),
            longitude=stamp.fact(self.value_or_default(record, "longitude", context)),
            region=self.value_or_default(record, "region", context),
            cash_value=stamp.fact(self.value_or_default(record, "cash_value", context)),
            confidence=stamp.confidence,
            sources=stamp.sources,
            last_verified=stamp.last_verified,
            patch_version=str(stamp.patch_version),
        )


class RoleMigrator(RecordMigrator[LegacyRole, Role]):
    entity_type: ClassVar[EntityType] = EntityType.ROLE
    label: ClassVar[str] = "Role"
    schema = LegacyRole
    identity_fields: ClassVar[tuple[str, ...]] = ("id", "name")
    carries_patch_version: ClassVar[bool] = False

    def build(
        self, record: LegacyRole, *, key: str, stamp: FactStamp, context: RecordContext
    ) -> Role:
        return Role(
            id=key,
            name=str(record.name),
            mentor_npc=record.mentor_npc,
            unlock_cost_gold=stamp.fact(self.value_or_default(record, "unlock_cost_gold", context)),
            player_rank_required=stamp.fact(
                self.value_or_default(record, "player_rank_required", context)
            ),
            max_rank=stamp.fact(self.value_or_default(record, "max_rank", context)),
            rank_benefits=self.value_or_default(record, "rank_benefits", context),
            confidence=stamp.confidence,
            sources=stamp.sources,
            last_verified=stamp.last_verified,
        )


MIGRATORS: Final[Mapping[EntityType, RecordMigrator[Any, TrackedEntity]]] = {
    EntityType.ITEM: ItemMigrator(),
    EntityType.FORMULA: FormulaMigrator(),
    EntityType.ANIMAL: AnimalMigrator(),
    EntityType.WAYPOINT_NODE: WaypointNodeMigrator(),
    EntityType.WAYPOINT_ROUTE: WaypointRouteMigrator(),
    EntityType.COLLECTIBLE_ENTRY: CollectibleEntryMigrator(),
    EntityType.ROLE: RoleMigrator(),
}
