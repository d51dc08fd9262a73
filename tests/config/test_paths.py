from __future__ import annotations

from pathlib import Path

import pytest

from compendium.config import PathsConfig, get_paths_config


def test_defaults_without_environment() -> None:
    config = get_paths_config()

    assert config.data_dir == Path("data")
    assert config.input_filename == "extraction_log.json"
    assert config.output_dir is None
    assert config.resolve_output_dir() == Path("data").resolve() / "v3"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("COMPENDIUM_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("COMPENDIUM_INPUT_FILE", "legacy.json")
    monkeypatch.setenv("COMPENDIUM_OUTPUT_DIR", str(tmp_path / "out"))

    config = get_paths_config()

    assert config.input_path() == tmp_path.resolve() / "legacy.json"
    assert config.resolve_output_dir() == (tmp_path / "out").resolve()


def test_blank_environment_values_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPENDIUM_INPUT_FILE", "   ")

    assert get_paths_config().input_filename == "extraction_log.json"


def test_absolute_input_override_is_kept(tmp_path: Path) -> None:
    config = PathsConfig(data_dir=Path("data"))
    target = tmp_path / "other.json"

    assert config.input_path(str(target)) == target
    assert config.input_path("nested/x.json") == Path("data").resolve() / "nested" / "x.json"
