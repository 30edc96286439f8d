"""Pipe obstacle: a top and bottom segment with a fixed gap between them."""

from __future__ import annotations

from typing import TYPE_CHECKING
import logging

from skygate.core.state import GameState
from skygate.settings import FieldSettings, PipeSettings

if TYPE_CHECKING:
    from skygate.entities.bird import Bird

logger = logging.getLogger(__name__)


class Pipe:
    """
    Pooled pipe pair.

    Lifecycle: inactive in the pool, ``init`` when spawned at the right
    edge, ``advance`` every tick until it leaves the left edge, then the
    loop releases it and the pool calls ``reset``.
    """

    def __init__(
        self,
        settings: PipeSettings,
        field: FieldSettings,
    ) -> None:
        self.settings = settings
        self.field = field
        self.x = float(field.width)
        self.top_height = 0.0
        self.bottom_y = 0.0
        self.scored = False
        self.active = False

    @property
    def width(self) -> float:
        return self.settings.width

    @property
    def gap(self) -> float:
        return self.settings.gap

    def reset(self) -> None:
        self.x = float(self.field.width)
        self.top_height = 0.0
        self.bottom_y = 0.0
        self.scored = False
        self.active = False

    def init(self, top_height: float) -> None:
        """Place the pipe at the spawn edge with its gap below ``top_height``."""
        self.x = float(self.field.width)
        self.top_height = top_height
        self.bottom_y = top_height + self.settings.gap
        self.scored = False
        self.active = True

    def advance(self, state: GameState, avatar_x: float) -> bool:
        """Scroll one tick and credit the pass once.

        Returns:
            False once the pipe is fully off the left edge
        """
        if not self.active:
            return False

        self.x -= self.settings.speed * state.difficulty

        if not self.scored and self.x + self.settings.width < avatar_x:
            state.record_pass()
            self.scored = True
            logger.debug(f"Pipe passed, score {state.score}, difficulty {state.difficulty:.2f}")

        return self.x + self.settings.width > 0

    def collides_with(self, bird: Bird) -> bool:
        """Margin-shrunk box test against both segments."""
        if not self.active:
            return False

        left, top, right, bottom = bird.hitbox
        if right > self.x and left < self.x + self.settings.width:
            if top < self.top_height or bottom > self.bottom_y:
                return True
        return False
