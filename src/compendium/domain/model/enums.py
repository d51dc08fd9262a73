"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class SourceKind(StrEnum):
    """Closed set of provenance kinds.

    Values are the tags used by legacy extracts, so raw payloads validate
    against this enum without translation.
    """

    DIRECT_OBSERVATION = "GAME_TEST"
    DISCUSSION_THREAD = "REDDIT"
    COMMUNITY_WIKI = "WIKI"
    VIDEO_EVIDENCE = "YOUTUBE"
    MAP_DATA = "JEANROPKE_MAP"
    INTERNAL_ANALYSIS = "FRONTIER_ALGORITHM"
    COMMUNITY_CONSENSUS = "COMMUNITY_TESTED"
    CALCULATED = "CALCULATED"


class Confidence(StrEnum):
    """Ordered confidence tiers: ``LOW < MEDIUM < HIGH``."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANKS[self]

    # str ordering would sort HIGH before LOW, so compare by rank instead.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank >= other.rank


_CONFIDENCE_RANKS: Final[dict[Confidence, int]] = {
    Confidence.LOW: 0,
    Confidence.MEDIUM: 1,
    Confidence.HIGH: 2,
}


class EntityType(StrEnum):
    """Discriminator for the migrated domains."""

    ITEM = "item"
    FORMULA = "formula"
    ANIMAL = "animal"
    WAYPOINT_NODE = "waypoint_node"
    WAYPOINT_ROUTE = "waypoint_route"
    COLLECTIBLE_ENTRY = "collectible_entry"
    ROLE = "role"
