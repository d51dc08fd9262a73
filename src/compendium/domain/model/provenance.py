from __future__ import annotations

from dataclasses import dataclass

from compendium.domain.model.enums import SourceKind


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceReference:
    """One citation backing a fact: what kind of evidence, and when."""

    kind: SourceKind
    date: str
    url: str | None = None
    verified_by: str | None = None
    notes: str | None = None

    @property
    def is_direct_observation(self) -> bool:
        return self.kind is SourceKind.DIRECT_OBSERVATION
