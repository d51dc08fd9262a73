"""Lenient Pydantic models for legacy extract payloads.

Every non-identity field is optional here; required-field checks and defaults
live in the migrators so that missing data becomes a diagnostic, not an
exception. ``sources`` is deliberately not declared on record models: it is
sanitized separately, entry by entry.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from compendium.domain.model.enums import SourceKind

ISO_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


class LegacyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, frozen=True)

    id: str | None = None


class SourceReferencePayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    kind: SourceKind = Field(validation_alias=AliasChoices("kind", "type"))
    date: str = Field(pattern=ISO_DATE_PATTERN)
    url: str | None = None
    verified_by: str | None = Field(
        default=None, validation_alias=AliasChoices("verified_by", "verifiedBy")
    )
    notes: str | None = None

    @field_validator("url", "verified_by", "notes", mode="before")
    @classmethod
    def _drop_non_text(cls, value: Any) -> str | None:
        # Annotations never reject a reference; non-text values become None.
        return value if isinstance(value, str) else None


class LegacyItem(LegacyBaseModel):
    name: str | None = None
    category: str | None = None
    shop: str | None = None
    price: float | None = None
    gold_price: float | None = Field(
        default=None, validation_alias=AliasChoices("gold_price", "goldPrice")
    )
    rarity: str | None = None
    description: str | None = None
    type: str | None = None
    stats: dict[str, float] | None = None
    last_verified: str | None = None
    patch_version: str | None = None


class LegacyFormula(LegacyBaseModel):
    system: str | None = None
    name: str | None = None
    formula: str | None = None
    description: str | None = None
    variables: list[Any] | None = None
    optimal_parameters: dict[str, Any] | None = None
    examples: list[Any] | None = None
    last_verified: str | None = None
    patch_version: str | None = None


class LegacyAnimal(LegacyBaseModel):
    name: str | None = None
    species: str | None = None
    size: str | None = None
    ai_rating: float | None = None
    health: float | None = None
    materials: list[Any] | None = None
    spawns: list[Any] | None = None
    can_study: bool | None = None
    last_verified: str | None = None
    patch_version: str | None = None


class LegacyWaypointNode(LegacyBaseModel):
    name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    region: str | None = None
    cost_cash: float | None = None
    last_verified: str | None = None


class LegacyWaypointRoute(LegacyBaseModel):
    from_id: str | None = Field(
        default=None, validation_alias=AliasChoices("from_id", "from_node_id")
    )
    to_id: str | None = Field(default=None, validation_alias=AliasChoices("to_id", "to_node_id"))
    distance_miles: float | None = None
    travel_time_seconds: float | None = None
    cost_cash: float | None = None
    asymmetric: bool | None = None
    last_verified: str | None = None


class LegacyCollectibleEntry(LegacyBaseModel):
    collection_set_id: str | None = Field(
        default=None, validation_alias=AliasChoices("collection_set_id", "collection_set")
    )
    cycle: int | None = None
    name: str | None = None
    description: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    region: str | None = None
    cash_value: float | None = None
    last_verified: str | None = None
    patch_version: str | None = None


class LegacyRole(LegacyBaseModel):
    name: str | None = None
    mentor_npc: str | None = None
    unlock_cost_gold: float | None = None
    player_rank_required: int | None = None
    max_rank: int | None = None
    rank_benefits: list[Any] | None = None
    last_verified: str | None = None


class LegacyExtract(BaseModel):
    """Top-level legacy extract: up to seven optional record collections.

    Records stay untyped at this level; each migrator validates its own.
    """

    model_config = ConfigDict(extra="ignore")

    items: list[Any] | None = None
    formulas: list[Any] | None = Field(
        default=None, validation_alias=AliasChoices("formulas", "economic_formulas")
    )
    animals: list[Any] | None = None
    waypoint_nodes: list[Any] | None = Field(
        default=None, validation_alias=AliasChoices("waypoint_nodes", "fast_travel_nodes")
    )
    waypoint_routes: list[Any] | None = Field(
        default=None, validation_alias=AliasChoices("waypoint_routes", "fast_travel_routes")
    )
    collectible_entries: list[Any] | None = Field(
        default=None, validation_alias=AliasChoices("collectible_entries", "collector_items")
    )
    roles: list[Any] | None = None
