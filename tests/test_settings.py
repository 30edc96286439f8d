from pathlib import Path

import pytest
from pydantic import ValidationError

from skygate.settings import BirdSettings, FieldSettings, PipeSettings, PowerUpSettings, Settings, get_settings


def test_defaults(settings: Settings) -> None:
    assert settings.physics.gravity == 0.5
    assert settings.physics.jump_force == -8.0
    assert settings.physics.max_velocity == 10.0
    assert (settings.bird.width, settings.bird.height) == (34.0, 24.0)
    assert settings.bird.collision_margin == 5.0
    assert settings.pipes.gap == 150.0
    assert settings.pipes.spawn_interval == 3000.0
    assert settings.powerups.duration == 5000.0
    assert settings.powerups.spawn_chance == 0.3
    assert (settings.field.width, settings.field.height) == (800, 600)
    assert (settings.pools.max_pipes, settings.pools.max_powerups) == (4, 3)
    assert settings.seed is None


def test_pipe_top_range(settings: Settings) -> None:
    assert settings.field.ground_inset == 87.0
    assert settings.pipe_top_range == (50.0, 313.0)


def test_degenerate_field_is_rejected() -> None:
    with pytest.raises(ValidationError, match="leaves no room"):
        Settings(_env_file=None, field=FieldSettings(height=300))


def test_oversized_gap_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, pipes=PipeSettings(gap=500.0))


def test_margin_must_leave_a_hitbox() -> None:
    with pytest.raises(ValidationError, match="no hitbox"):
        BirdSettings(collision_margin=12.0)
    assert BirdSettings(collision_margin=11.0).collision_margin == 11.0


def test_spawn_chance_is_a_probability() -> None:
    with pytest.raises(ValidationError):
        PowerUpSettings(spawn_chance=1.5)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKYGATE_PIPES__GAP", "120")
    monkeypatch.setenv("SKYGATE_SEED", "42")

    settings = Settings(_env_file=None)

    assert settings.pipes.gap == 120.0
    assert settings.pipes.width == 52.0
    assert settings.seed == 42


def test_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("SKYGATE_DEBUG=true\nSKYGATE_POOLS__MAX_PIPES=6\n")
    settings = Settings()
    assert settings.debug is True
    assert settings.pools.max_pipes == 6


def test_high_score_file(tmp_path: Path) -> None:
    settings = Settings(_env_file=None, data_path=tmp_path)
    assert settings.high_score_file == tmp_path / "highscore.json"


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
