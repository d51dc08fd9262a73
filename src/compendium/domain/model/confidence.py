"""Provenance-based confidence inference."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from compendium.domain.model.enums import Confidence

if TYPE_CHECKING:
    from collections.abc import Sequence

    from compendium.domain.model.provenance import SourceReference

HIGH_MIN_CORROBORATING: Final[int] = 2
MEDIUM_MIN_SOURCES: Final[int] = 3


def infer_confidence(sources: Sequence[SourceReference]) -> Confidence:
    """Derive the confidence tier for a fact from its sanitized sources.

    A direct observation plus at least two corroborating references of other
    kinds is HIGH. A direct observation alone, or three or more references of
    any kind, is MEDIUM. Everything else, including no sources, is LOW.
    """

    if not sources:
        return Confidence.LOW

    has_direct_observation = any(source.is_direct_observation for source in sources)
    corroborating = sum(1 for source in sources if not source.is_direct_observation)

    if has_direct_observation and corroborating >= HIGH_MIN_CORROBORATING:
        return Confidence.HIGH
    if has_direct_observation or len(sources) >= MEDIUM_MIN_SOURCES:
        return Confidence.MEDIUM
    return Confidence.LOW
