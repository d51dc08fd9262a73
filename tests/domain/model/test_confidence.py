from __future__ import annotations

from itertools import product

import pytest

from compendium.domain.model import Confidence, SourceKind, infer_confidence
from tests.helpers.extracts import reference

DIRECT = SourceKind.DIRECT_OBSERVATION
WIKI = SourceKind.COMMUNITY_WIKI
REDDIT = SourceKind.DISCUSSION_THREAD
VIDEO = SourceKind.VIDEO_EVIDENCE


@pytest.mark.parametrize(
    ("kinds", "expected"),
    [
        ((), Confidence.LOW),
        ((WIKI,), Confidence.LOW),
        ((WIKI, REDDIT), Confidence.LOW),
        ((DIRECT,), Confidence.MEDIUM),
        ((DIRECT, WIKI), Confidence.MEDIUM),
        ((DIRECT, DIRECT), Confidence.MEDIUM),
        ((WIKI, REDDIT, VIDEO), Confidence.MEDIUM),
        ((DIRECT, WIKI, REDDIT), Confidence.HIGH),
        ((DIRECT, DIRECT, WIKI), Confidence.MEDIUM),
        ((WIKI, DIRECT, VIDEO, REDDIT), Confidence.HIGH),
    ],
)
def test_infer_confidence(kinds: tuple[SourceKind, ...], expected: Confidence) -> None:
    assert infer_confidence([reference(kind) for kind in kinds]) is expected


def test_infer_confidence_ignores_order() -> None:
    forward = [reference(DIRECT), reference(WIKI), reference(REDDIT)]

    assert infer_confidence(forward) is infer_confidence(list(reversed(forward)))


def test_adding_a_source_never_lowers_confidence() -> None:
    kinds = (DIRECT, WIKI, REDDIT)
    for length in range(4):
        for combo in product(kinds, repeat=length):
            base = [reference(kind) for kind in combo]
            for extra in kinds:
                assert infer_confidence([*base, reference(extra)]) >= infer_confidence(base)
