"""Fixed default values applied to optional fields absent from legacy records.

Defaults are constants per ``(entity type, field)``; they are never derived
from other fields of the same record. ``RUN_DATE`` marks fields that default to
the date the migration run started.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from compendium.domain.model.enums import EntityType

if TYPE_CHECKING:
    from collections.abc import Mapping


class _RunDate(Enum):
    RUN_DATE = "run_date"


RUN_DATE: Final = _RunDate.RUN_DATE
UNKNOWN_PATCH: Final[str] = "UNKNOWN"
UNKNOWN_REGION: Final[str] = "Unknown"

_COMMON: Final[Mapping[str, object]] = {"last_verified": RUN_DATE}

DEFAULTS: Final[Mapping[EntityType, Mapping[str, object]]] = MappingProxyType(
    {
        EntityType.ITEM: MappingProxyType(
            {
                **_COMMON,
                "category": "weapon",
                "shop": "general_store",
                "patch_version": UNKNOWN_PATCH,
            }
        ),
        EntityType.FORMULA: MappingProxyType(
            {
                **_COMMON,
                "formula": "UNKNOWN",
                "variables": (),
                "examples": (),
                "patch_version": UNKNOWN_PATCH,
            }
        ),
        EntityType.ANIMAL: MappingProxyType(
            {
                **_COMMON,
                "species": "Unknown",
                "size": "medium",
                "ai_rating": 5,
                "health": 100,
                "materials": (),
                "spawns": (),
                "can_study": False,
                "patch_version": UNKNOWN_PATCH,
            }
        ),
        EntityType.WAYPOINT_NODE: MappingProxyType(
            {
                **_COMMON,
                "latitude": 0,
                "longitude": 0,
                "region": UNKNOWN_REGION,
                "cost_cash": 0,
            }
        ),
        EntityType.WAYPOINT_ROUTE: MappingProxyType(
            {
                **_COMMON,
                "distance_miles": 0,
                "travel_time_seconds": 0,
                "cost_cash": 0,
                "asymmetric": False,
            }
        ),
        EntityType.COLLECTIBLE_ENTRY: MappingProxyType(
            {
                **_COMMON,
                "cycle": 1,
                "latitude": 0,
                "longitude": 0,
                "region": UNKNOWN_REGION,
                "cash_value": 0,
                "patch_version": UNKNOWN_PATCH,
            }
        ),
        EntityType.ROLE: MappingProxyType(
            {
                **_COMMON,
                "unlock_cost_gold": 15,
                "player_rank_required": 5,
                "max_rank": 20,
                "rank_benefits": (),
            }
        ),
    }
)


def default_for(entity_type: EntityType, field_name: str) -> object:
    """Return the fixed default for ``field_name`` on ``entity_type``.

    Raises ``KeyError`` for fields that have no default; those are either
    required or left as ``None``.
    """

    return DEFAULTS[entity_type][field_name]
