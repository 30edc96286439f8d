"""
Simulation driver.

One ``tick(now_ms)`` per rendered frame, in a fixed order:

    0. expire invincibility whose window has passed
    1. spawn a pipe (and maybe a power-up) when the interval has elapsed
    2. advance active pipes and power-ups, releasing finished ones
    3. bird physics and collisions

Rendering reads the loop's state after ``tick`` returns. ``flap()`` and
``reset_session()`` are the only mutators meant for input wiring.
"""

import random
import logging
from typing import Optional

from skygate.core.difficulty import spawn_interval
from skygate.core.events import Event, EventBus, EventType
from skygate.core.highscore import HighScoreStore, MemoryHighScoreStore
from skygate.core.pool import ObjectPool
from skygate.core.state import GameState
from skygate.entities.bird import Bird
from skygate.entities.pipe import Pipe
from skygate.entities.powerup import PowerUp
from skygate.settings import Settings

logger = logging.getLogger(__name__)


class GameLoop:
    """Owns the session state, the bird and both entity pools.

    Args:
        settings: Validated configuration (geometry is checked there)
        store: High-score persistence hook, loaded once here
        event_bus: Bus for game notifications; one is created if omitted
        rng: Random source for gap placement and power-up rolls
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[HighScoreStore] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.event_bus = event_bus or EventBus()
        self.store = store or MemoryHighScoreStore()
        self.rng = rng or random.Random(self.settings.seed)

        cfg = self.settings
        self.state = GameState(
            high_score=self.store.load(),
            difficulty_settings=cfg.difficulty,
            event_bus=self.event_bus,
            source=f"game_state:{id(self):x}",
        )
        self.bird = Bird(cfg.physics, cfg.bird, cfg.field, cfg.powerups)
        self.pipes: ObjectPool[Pipe] = ObjectPool(
            lambda: Pipe(cfg.pipes, cfg.field),
            Pipe.reset,
            initial_size=cfg.pools.max_pipes,
            name="pipes",
            on_overflow=self._on_pool_overflow,
        )
        self.powerups: ObjectPool[PowerUp] = ObjectPool(
            lambda: PowerUp(cfg.powerups, cfg.pipes.speed),
            PowerUp.reset,
            initial_size=cfg.pools.max_powerups,
            name="powerups",
            on_overflow=self._on_pool_overflow,
        )
        self.frame = 0

        self._unsubscribe = self.event_bus.subscribe(EventType.HIGH_SCORE, self._on_high_score)

        logger.info(
            f"GameLoop ready: field {cfg.field.width}x{cfg.field.height}, "
            f"high score {self.state.high_score}"
        )

    # External mutators
    def flap(self) -> None:
        self.bird.flap(self.state)

    def reset_session(self) -> None:
        """Start a new session. Pending invincibility is dropped."""
        self.state.reset()
        self.pipes.release_all_active()
        self.powerups.release_all_active()
        self.bird.reset()
        logger.info("Session reset")
        self.event_bus.emit(Event(EventType.SESSION_RESET, source="game_loop"))

    def handle_input(self, event: Event) -> bool:
        """Route a button press: flap in play, restart after game over.

        Returns:
            True if the event was handled
        """
        if event.type != EventType.BUTTON_PRESS:
            return False
        if self.state.game_over:
            self.reset_session()
        else:
            self.flap()
        return True

    def close(self) -> None:
        """Detach from the event bus."""
        self._unsubscribe()

    # Frame
    def tick(self, now_ms: float) -> None:
        """Advance the simulation by one frame at timestamp ``now_ms``."""
        state = self.state

        state.expire_invincibility(now_ms)

        if not state.game_over and self._spawn_due(now_ms):
            self.spawn_pipe()
            state.last_spawn_time = now_ms

        if not state.game_over:
            self._advance_entities()

        collected = self.bird.update(state, self.pipes.active, self.powerups, now_ms)
        if collected:
            self.event_bus.emit(Event(
                EventType.POWERUP_COLLECTED,
                data={"count": collected},
                source="game_loop",
            ))

        self.frame += 1

    def spawn_pipe(self) -> Pipe:
        """Spawn one pipe with a random gap, maybe with a power-up inside."""
        cfg = self.settings
        low, high = cfg.pipe_top_range
        top_height = self.rng.uniform(low, high)

        pipe = self.pipes.acquire()
        pipe.init(top_height)

        if self.rng.random() < cfg.powerups.spawn_chance:
            powerup = self.powerups.acquire()
            powerup.init(
                cfg.field.width + cfg.pipes.width / 2,
                top_height + cfg.pipes.gap / 2,
            )

        logger.debug(f"Spawned pipe top={top_height:.1f} (active {self.pipes.active_count})")
        return pipe

    def _spawn_due(self, now_ms: float) -> bool:
        interval = spawn_interval(self.settings.pipes.spawn_interval, self.state.difficulty)
        return now_ms - self.state.last_spawn_time > interval

    def _advance_entities(self) -> None:
        avatar_x = self.bird.x
        for pipe in self.pipes.active:
            if not pipe.advance(self.state, avatar_x):
                self.pipes.release(pipe)

        for powerup in self.powerups.active:
            if not powerup.advance(self.state):
                self.powerups.release(powerup)

    def _on_high_score(self, event: Event) -> None:
        # The bus may be shared with other loops
        if event.source != self.state.source:
            return
        self.store.save(event.data["high_score"])

    def _on_pool_overflow(self, pool: ObjectPool) -> None:
        self.event_bus.emit(Event(
            EventType.POOL_OVERFLOW,
            data={"pool": pool.name, "size": pool.size, "capacity": pool.capacity},
            source="game_loop",
        ))
