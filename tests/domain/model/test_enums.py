from __future__ import annotations

from compendium.domain.model import Confidence, SourceKind


def test_confidence_orders_by_tier() -> None:
    assert Confidence.LOW < Confidence.MEDIUM < Confidence.HIGH
    assert Confidence.HIGH >= Confidence.MEDIUM
    assert max(Confidence) is Confidence.HIGH
    assert sorted([Confidence.HIGH, Confidence.LOW, Confidence.MEDIUM]) == [
        Confidence.LOW,
        Confidence.MEDIUM,
        Confidence.HIGH,
    ]


def test_source_kind_accepts_legacy_tags() -> None:
    assert SourceKind("GAME_TEST") is SourceKind.DIRECT_OBSERVATION
    assert SourceKind("JEANROPKE_MAP") is SourceKind.MAP_DATA
    assert len(SourceKind) == 8
