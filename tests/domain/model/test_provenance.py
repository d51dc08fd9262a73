from __future__ import annotations

import pytest

from compendium.domain.model import SourceKind
from tests.helpers.extracts import reference


@pytest.mark.parametrize("kind", list(SourceKind))
def test_only_game_tests_are_direct_observations(kind: SourceKind) -> None:
    assert reference(kind).is_direct_observation is (kind is SourceKind.DIRECT_OBSERVATION)
