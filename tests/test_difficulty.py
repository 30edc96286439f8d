import pytest

from skygate.core.difficulty import difficulty_for_score, spawn_interval
from skygate.settings import DifficultySettings


@pytest.mark.parametrize(
    "score, expected",
    [(0, 1.0), (10, 1.1), (20, 1.2), (50, 1.5), (100, 2.0), (101, 2.0), (500, 2.0)],
)
def test_difficulty_curve(score: int, expected: float) -> None:
    assert difficulty_for_score(score) == pytest.approx(expected)


def test_matches_closed_form_for_all_small_scores() -> None:
    for s in range(0, 300):
        assert difficulty_for_score(s) == min(1 + (s / 20) * 0.2, 2.0)


def test_monotonic_and_bounded() -> None:
    values = [difficulty_for_score(s) for s in range(0, 300)]
    assert values == sorted(values)
    assert min(values) == 1.0
    assert max(values) == 2.0


def test_custom_curve() -> None:
    cfg = DifficultySettings(step_scores=10, step_increase=0.5, max_multiplier=3.0)
    assert difficulty_for_score(10, cfg) == pytest.approx(1.5)
    assert difficulty_for_score(1000, cfg) == 3.0


def test_spawn_interval_shrinks_with_difficulty() -> None:
    assert spawn_interval(3000, 1.0) == 3000
    assert spawn_interval(3000, 2.0) == 1500
