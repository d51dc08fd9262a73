from __future__ import annotations

import pytest

from compendium.domain.migration import DEFAULTS, default_for
from compendium.domain.migration.defaults import RUN_DATE
from compendium.domain.model import EntityType


def test_every_entity_type_has_defaults() -> None:
    assert set(DEFAULTS) == set(EntityType)
    for entity_type in EntityType:
        assert default_for(entity_type, "last_verified") is RUN_DATE


@pytest.mark.parametrize(
    ("entity_type", "field_name", "expected"),
    [
        (EntityType.ITEM, "category", "weapon"),
        (EntityType.ITEM, "shop", "general_store"),
        (EntityType.ITEM, "patch_version", "UNKNOWN"),
        (EntityType.FORMULA, "formula", "UNKNOWN"),
        (EntityType.ANIMAL, "ai_rating", 5),
        (EntityType.ANIMAL, "health", 100),
        (EntityType.ANIMAL, "size", "medium"),
        (EntityType.WAYPOINT_NODE, "region", "Unknown"),
        (EntityType.WAYPOINT_ROUTE, "asymmetric", False),
        (EntityType.COLLECTIBLE_ENTRY, "cycle", 1),
        (EntityType.ROLE, "unlock_cost_gold", 15),
        (EntityType.ROLE, "player_rank_required", 5),
        (EntityType.ROLE, "max_rank", 20),
    ],
)
def test_fixed_defaults(entity_type: EntityType, field_name: str, expected: object) -> None:
    assert default_for(entity_type, field_name) == expected


def test_fields_without_default_raise_key_error() -> None:
    with pytest.raises(KeyError):
        default_for(EntityType.ITEM, "name")


def test_defaults_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULTS[EntityType.ITEM]["category"] = "tool"  # type: ignore[index]
