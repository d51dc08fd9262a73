from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.extracts import FIXED_NOW

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    def clock() -> datetime:
        return FIXED_NOW

    return clock


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "COMPENDIUM_DATA_DIR",
        "COMPENDIUM_INPUT_FILE",
        "COMPENDIUM_OUTPUT_DIR",
        "COMPENDIUM_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
