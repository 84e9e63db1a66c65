import pytest

from roundcaddy.sg.benchmarks import (
    expected_from_bunker,
    expected_from_recovery,
    expected_from_rough,
    expected_on_green,
)
from roundcaddy.sg.lies import (
    APPROACH_RESULT_LIES,
    ApproachResult,
    Lie,
    classify_approach_result,
    coerce_approach_result,
    expected_for_lie,
)


@pytest.mark.parametrize(
    "result, lie",
    [
        ("green", Lie.GREEN),
        ("fringe", Lie.GREEN),
        ("greenside_rough", Lie.ROUGH),
        ("bunker", Lie.BUNKER),
        ("short", Lie.RECOVERY),
        ("long", Lie.RECOVERY),
        ("left", Lie.RECOVERY),
        ("right", Lie.RECOVERY),
    ],
)
def test_classifier_mapping(result: str, lie: Lie) -> None:
    assert classify_approach_result(result) is lie


def test_every_result_is_mapped() -> None:
    assert set(APPROACH_RESULT_LIES) == set(ApproachResult)


def test_missing_or_unknown_result_falls_back() -> None:
    assert classify_approach_result(None) is Lie.RECOVERY
    assert classify_approach_result("water") is Lie.RECOVERY
    assert classify_approach_result(None, gir=True) is Lie.GREEN


def test_coerce_normalises_spelling() -> None:
    assert coerce_approach_result("Greenside Rough") is ApproachResult.GREENSIDE_ROUGH
    assert coerce_approach_result("greenside-rough") is ApproachResult.GREENSIDE_ROUGH
    assert coerce_approach_result(" BUNKER ") is ApproachResult.BUNKER
    assert coerce_approach_result(42) is None
    assert coerce_approach_result("") is None


def test_expected_for_lie_uses_matching_table() -> None:
    assert expected_for_lie(Lie.HOLE, 30) == 0.0
    assert expected_for_lie(Lie.GREEN, 10) == expected_on_green(10)
    assert expected_for_lie(Lie.ROUGH, 30) == expected_from_rough(30)
    assert expected_for_lie(Lie.BUNKER, 20) == expected_from_bunker(20)
    assert expected_for_lie(Lie.RECOVERY, 40) == expected_from_recovery(40)
