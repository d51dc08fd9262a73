"""Builders for raw legacy payloads and source references used across tests."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from compendium.domain.model import SourceKind, SourceReference

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)
FIXED_RUN_DATE = "2024-05-01"


def raw_source(kind: str = "GAME_TEST", date: str = "2024-03-01", **extra: Any) -> dict[str, Any]:
    return {"type": kind, "date": date, **extra}


def high_sources() -> list[dict[str, Any]]:
    """Direct observation plus two corroborating references."""

    return [raw_source("GAME_TEST"), raw_source("WIKI"), raw_source("REDDIT")]


def reference(kind: SourceKind, date: str = "2024-03-01") -> SourceReference:
    return SourceReference(kind=kind, date=date)


def raw_item(item_id: str = "rifle_varmint", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {"id": item_id, "name": "Varmint Rifle", "price": 72.5}
    payload.update(overrides)
    return payload
