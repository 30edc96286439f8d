import pytest

from skygate.core.state import GameState
from skygate.entities.bird import Bird
from skygate.entities.powerup import PowerUp
from skygate.settings import Settings


@pytest.fixture
def powerup(settings: Settings) -> PowerUp:
    return PowerUp(settings.powerups, settings.pipes.speed)


def test_init_and_reset(powerup: PowerUp) -> None:
    powerup.init(826.0, 275.0)
    assert (powerup.x, powerup.y) == (826.0, 275.0)
    assert powerup.active is True
    assert powerup.collected is False

    powerup.collected = True
    powerup.reset()
    assert (powerup.x, powerup.y) == (0.0, 0.0)
    assert powerup.active is False
    assert powerup.collected is False


def test_moves_at_pipe_speed_times_difficulty(powerup: PowerUp, state: GameState) -> None:
    powerup.init(500.0, 300.0)
    powerup.advance(state)
    assert powerup.x == pytest.approx(498.0)

    state.difficulty = 2.0
    powerup.advance(state)
    assert powerup.x == pytest.approx(494.0)


def test_advance_false_when_off_screen(powerup: PowerUp, state: GameState) -> None:
    powerup.init(-powerup.size + 1.0, 300.0)
    assert powerup.advance(state) is False


def test_advance_false_once_collected(powerup: PowerUp, state: GameState) -> None:
    powerup.init(400.0, 300.0)
    powerup.collected = True
    assert powerup.advance(state) is False


def test_inactive_powerup_is_inert(powerup: PowerUp, state: GameState, bird: Bird) -> None:
    assert powerup.advance(state) is False
    powerup.x, powerup.y = bird.x, bird.y
    assert powerup.collides_with(bird) is False


def test_pickup_distance(powerup: PowerUp, bird: Bird) -> None:
    bird.x, bird.y = 200.0, 300.0
    reach = powerup.size / 2 + bird.width / 2  # 32

    powerup.init(bird.x + reach, bird.y)
    assert powerup.collides_with(bird) is False

    powerup.init(bird.x + reach - 0.5, bird.y)
    assert powerup.collides_with(bird) is True


def test_pickup_uses_euclidean_distance(powerup: PowerUp, bird: Bird) -> None:
    bird.x, bird.y = 200.0, 300.0
    # 20 / 20 offset is ~28.3 away: inside the 32 reach
    powerup.init(bird.x + 20.0, bird.y + 20.0)
    assert powerup.collides_with(bird) is True

    # 25 / 25 is ~35.4 away: outside
    powerup.init(bird.x + 25.0, bird.y + 25.0)
    assert powerup.collides_with(bird) is False


def test_pickup_reports_only_once(powerup: PowerUp, bird: Bird) -> None:
    powerup.init(bird.x, bird.y)
    assert powerup.collides_with(bird) is True
    assert powerup.collected is True
    assert powerup.collides_with(bird) is False
