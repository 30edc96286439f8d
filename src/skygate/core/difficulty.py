"""Score to difficulty curve."""

from skygate.settings import DifficultySettings

_DEFAULT = DifficultySettings()


def difficulty_for_score(score: int, settings: DifficultySettings | None = None) -> float:
    """Speed multiplier for a score.

    Grows by ``step_increase`` every ``step_scores`` points and saturates
    at ``max_multiplier``. With the defaults that is
    ``min(1 + (score / 20) * 0.2, 2.0)``.
    """
    cfg = settings or _DEFAULT
    return min(
        1.0 + (score / cfg.step_scores) * cfg.step_increase,
        cfg.max_multiplier,
    )


def spawn_interval(base_interval_ms: float, difficulty: float) -> float:
    """Milliseconds between pipe spawns at a given difficulty."""
    return base_interval_ms / difficulty
