"""Input/output locations for the migration runner."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

DEFAULT_DATA_DIR: Final[str] = "data"
DEFAULT_INPUT_FILENAME: Final[str] = "extraction_log.json"
DEFAULT_OUTPUT_SUBDIR: Final[str] = "v3"


@dataclass(frozen=True, slots=True)
class PathsConfig:
    data_dir: Path
    input_filename: str = DEFAULT_INPUT_FILENAME
    output_dir: Path | None = None

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def input_path(self, override: str | None = None) -> Path:
        """Resolve the extract path; relative names live under the data dir."""

        candidate = Path(override or self.input_filename).expanduser()
        if candidate.is_absolute():
            return candidate
        return self.resolve_data_dir() / candidate

    def resolve_output_dir(self) -> Path:
        if self.output_dir is not None:
            return self.output_dir.expanduser().resolve()
        return self.resolve_data_dir() / DEFAULT_OUTPUT_SUBDIR


def get_paths_config() -> PathsConfig:
    data_dir = optional_env_var("COMPENDIUM_DATA_DIR") or DEFAULT_DATA_DIR
    input_filename = optional_env_var("COMPENDIUM_INPUT_FILE") or DEFAULT_INPUT_FILENAME
    output_dir = optional_env_var("COMPENDIUM_OUTPUT_DIR")
    return PathsConfig(
        data_dir=Path(data_dir),
        input_filename=input_filename,
        output_dir=Path(output_dir) if output_dir else None,
    )
