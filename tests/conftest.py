from __future__ import annotations

import random

import pytest

from skygate.core.events import EventBus
from skygate.core.highscore import MemoryHighScoreStore
from skygate.core.pool import ObjectPool
from skygate.core.state import GameState
from skygate.entities.bird import Bird
from skygate.entities.pipe import Pipe
from skygate.entities.powerup import PowerUp
from skygate.game.loop import GameLoop
from skygate.settings import Settings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep developer env vars and .env files out of Settings."""
    import os

    for key in list(os.environ):
        if key.startswith("SKYGATE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def bus() -> EventBus:
    return EventBus(history_limit=1000)


@pytest.fixture
def state(settings: Settings, bus: EventBus) -> GameState:
    return GameState(difficulty_settings=settings.difficulty, event_bus=bus)


@pytest.fixture
def bird(settings: Settings) -> Bird:
    return Bird(settings.physics, settings.bird, settings.field, settings.powerups)


@pytest.fixture
def pipe(settings: Settings) -> Pipe:
    return Pipe(settings.pipes, settings.field)


@pytest.fixture
def powerup_pool(settings: Settings) -> ObjectPool[PowerUp]:
    return ObjectPool(
        lambda: PowerUp(settings.powerups, settings.pipes.speed),
        PowerUp.reset,
        initial_size=settings.pools.max_powerups,
        name="powerups",
    )


@pytest.fixture
def store() -> MemoryHighScoreStore:
    return MemoryHighScoreStore()


@pytest.fixture
def game(settings: Settings, store: MemoryHighScoreStore, bus: EventBus) -> GameLoop:
    return GameLoop(settings=settings, store=store, event_bus=bus, rng=random.Random(1234))
