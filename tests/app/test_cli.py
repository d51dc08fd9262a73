from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from compendium.ui import cli
from tests.helpers.extracts import raw_item

if TYPE_CHECKING:
    from pathlib import Path


def _write_extract(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_migrates_default_input_into_data_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("COMPENDIUM_DATA_DIR", str(tmp_path))
    _write_extract(tmp_path / "extraction_log.json", {"items": [raw_item()]})

    cli.main([])

    output_dir = tmp_path / "v3"
    compendium = json.loads((output_dir / "compendium.json").read_text(encoding="utf-8"))
    assert "rifle_varmint" in compendium["items"]
    assert (output_dir / "economics.json").is_file()
    assert (output_dir / "migration_report.json").is_file()


def test_cli_accepts_explicit_paths(tmp_path: Path) -> None:
    source = _write_extract(tmp_path / "in" / "legacy.json", {"roles": []})
    output_dir = tmp_path / "out"

    cli.main([str(source), "--output-dir", str(output_dir), "--max-listed", "1"])

    report = json.loads((output_dir / "migration_report.json").read_text(encoding="utf-8"))
    assert report["success"] is True


def test_cli_exits_with_one_when_report_has_errors(tmp_path: Path) -> None:
    source = _write_extract(tmp_path / "legacy.json", {"items": [{"name": "No id"}]})

    with pytest.raises(SystemExit) as exc:
        cli.main([str(source), "--output-dir", str(tmp_path / "out")])

    assert exc.value.code == 1
    report = json.loads((tmp_path / "out" / "migration_report.json").read_text(encoding="utf-8"))
    assert report["success"] is False


def test_cli_exits_with_two_for_missing_input(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path / "missing.json")])

    assert exc.value.code == 2


def test_cli_exits_with_two_for_unknown_log_level(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("COMPENDIUM_LOG_LEVEL", "chatty")
    source = _write_extract(tmp_path / "legacy.json", {})

    with pytest.raises(SystemExit) as exc:
        cli.main([str(source)])

    assert exc.value.code == 2


def test_cli_rejects_negative_listing_limit() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["--max-listed", "-1"])

    assert exc.value.code == 2


def test_cli_truncates_listed_findings(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    records = [{"id": f"n{index}"} for index in range(4)]
    source = _write_extract(tmp_path / "legacy.json", {"waypoint_nodes": records})

    with caplog.at_level("INFO"):
        cli.main([str(source), "--output-dir", str(tmp_path / "out"), "--max-listed", "2"])

    assert "  ... and 2 more" in caplog.messages
    assert "MIGRATION COMPLETE" in caplog.messages


def test_sigint_handler_exits_cleanly() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.sigint_handler(2, None)

    assert exc.value.code == 0
