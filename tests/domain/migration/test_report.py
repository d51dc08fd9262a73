from __future__ import annotations

import pytest

from compendium.domain.migration import MigrationReport, MigrationStats, build_report, summarize

STATS = MigrationStats(
    items_migrated=3,
    formulas_migrated=1,
    animals_migrated=2,
    waypoint_nodes_migrated=4,
    waypoint_routes_migrated=5,
    collectible_entries_migrated=6,
    roles_migrated=7,
    high_confidence_count=10,
    medium_confidence_count=8,
    low_confidence_count=10,
)


def test_total_spans_all_domains() -> None:
    assert STATS.total_migrated == 28


def test_summary_without_findings() -> None:
    assert summarize(STATS, [], [], []) == (
        "MIGRATION COMPLETE\n"
        "Migrated 28 total entries (3 items, 1 formulas, 2 animals, 4 waypoint nodes, "
        "5 waypoint routes, 6 collectible entries, 7 roles)\n"
        "Confidence: 10 HIGH, 8 MEDIUM, 10 LOW"
    )


def test_summary_lists_only_non_empty_findings() -> None:
    lines = summarize(STATS, ["e1", "e2"], [], ["g1"]).splitlines()

    assert lines[3:] == ["2 errors found", "1 data gaps (unverified entries)"]


def test_summary_is_deterministic() -> None:
    args = (STATS, ["e"], ["w"], ["g"])

    assert summarize(*args) == summarize(*args)
    assert summarize(*args).splitlines()[-2] == "1 warnings"


def test_build_report_derives_success_from_errors() -> None:
    ok = build_report(stats=STATS, timestamp="t", errors=[], warnings=["w"], gaps=[])
    failed = build_report(stats=STATS, timestamp="t", errors=["e"], warnings=[], gaps=[])

    assert ok.success is True
    assert ok.warnings == ("w",)
    assert failed.success is False


def test_report_rejects_inconsistent_success() -> None:
    with pytest.raises(ValueError, match="success"):
        MigrationReport(success=True, timestamp="t", errors=("e",))
