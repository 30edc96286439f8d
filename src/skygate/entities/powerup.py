"""Invincibility star that drifts through a pipe gap."""

from __future__ import annotations

from typing import TYPE_CHECKING
import math

from skygate.core.state import GameState
from skygate.settings import PowerUpSettings

if TYPE_CHECKING:
    from skygate.entities.bird import Bird


class PowerUp:
    """Pooled power-up. Scrolls at pipe speed and can be picked up once."""

    def __init__(self, settings: PowerUpSettings, speed: float) -> None:
        self.settings = settings
        self.speed = speed
        self.x = 0.0
        self.y = 0.0
        self.collected = False
        self.active = False

    @property
    def size(self) -> float:
        return self.settings.size

    def reset(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.collected = False
        self.active = False

    def init(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.collected = False
        self.active = True

    def advance(self, state: GameState) -> bool:
        """Scroll one tick. False once off-screen or collected."""
        if not self.active:
            return False
        self.x -= self.speed * state.difficulty
        return self.x + self.settings.size > 0 and not self.collected

    def collides_with(self, bird: Bird) -> bool:
        """Center-distance pickup test. True at most once per spawn."""
        if not self.active or self.collected:
            return False

        distance = math.hypot(bird.x - self.x, bird.y - self.y)
        if distance < self.settings.size / 2 + bird.width / 2:
            self.collected = True
            return True
        return False
