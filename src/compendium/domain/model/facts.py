from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from compendium.domain.model.confidence import infer_confidence

if TYPE_CHECKING:
    from collections.abc import Iterable

    from compendium.domain.model.enums import Confidence
    from compendium.domain.model.provenance import SourceReference


@dataclass(frozen=True, slots=True, kw_only=True)
class VersionedFact[T]:
    """A value bundled with its confidence tier and supporting provenance."""

    value: T
    confidence: Confidence
    sources: tuple[SourceReference, ...] = field(default=())
    last_verified: str
    patch_version: str | None = None
    deprecation_warning: str | None = None

    def __post_init__(self) -> None:
        expected = infer_confidence(self.sources)
        if self.confidence is not expected:
            raise ValueError(
                f"confidence {self.confidence} does not match sources (expected {expected})"
            )

    @classmethod
    def observed(
        cls,
        value: T,
        *,
        sources: Iterable[SourceReference],
        last_verified: str,
        patch_version: str | None = None,
        deprecation_warning: str | None = None,
    ) -> VersionedFact[T]:
        """Build a fact whose confidence is inferred from ``sources``."""

        frozen_sources = tuple(sources)
        return cls(
            value=value,
            confidence=infer_confidence(frozen_sources),
            sources=frozen_sources,
            last_verified=last_verified,
            patch_version=patch_version,
            deprecation_warning=deprecation_warning,
        )
