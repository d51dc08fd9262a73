"""Structural validation and sanitization of raw source references."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import ValidationError

from compendium.domain.model.provenance import SourceReference

from .schema import SourceReferencePayload


def _parse_source_reference(raw: object) -> SourceReference | None:
    try:
        payload = SourceReferencePayload.model_validate(raw)
    except ValidationError:
        return None
    return SourceReference(
        kind=payload.kind,
        date=payload.date,
        url=payload.url,
        verified_by=payload.verified_by,
        notes=payload.notes,
    )


def validate_source_reference(raw: object) -> bool:
    """Return ``True`` when ``raw`` has a known kind and a ``YYYY-MM-DD`` date.

    Pure predicate: invalid input is reported by the return value, never by an
    exception.
    """

    return _parse_source_reference(raw) is not None


def sanitize_sources(raw: object) -> tuple[SourceReference, ...]:
    """Keep only the valid references of ``raw``, in input order."""

    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        return ()
    sanitized: list[SourceReference] = []
    for entry in raw:
        reference = _parse_source_reference(entry)
        if reference is not None:
            sanitized.append(reference)
    return tuple(sanitized)
