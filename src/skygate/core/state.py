"""
Session state for SKYGATE.

GameState is the context object every core operation receives. It holds
the score, the difficulty derived from it, the terminal flag and the
invincibility window. Nothing here is global: the game loop owns one
instance and passes it down.

Invincibility is an expiry timestamp rather than a timer callback. The
loop calls ``expire_invincibility`` at the start of each tick, so the flag
can only change on a tick boundary.
"""

from typing import Optional
import logging

from skygate.core.difficulty import difficulty_for_score
from skygate.core.events import Event, EventBus, EventType
from skygate.settings import DifficultySettings

logger = logging.getLogger(__name__)


class GameState:
    """
    Score, difficulty and terminal state for one game session.

    ``reset()`` starts a new session on the same instance and keeps
    ``high_score``.
    """

    def __init__(
        self,
        high_score: int = 0,
        difficulty_settings: DifficultySettings | None = None,
        event_bus: EventBus | None = None,
        source: str = "game_state",
    ) -> None:
        self._difficulty_settings = difficulty_settings or DifficultySettings()
        self._event_bus = event_bus
        self.source = source
        self.high_score = max(0, int(high_score))

        self.game_over = False
        self.score = 0
        self.is_invincible = False
        self.invincible_until: Optional[float] = None
        self.difficulty = 1.0
        self.last_spawn_time = 0.0
        self.reset()

    def reset(self) -> None:
        """Restore session fields. Cancels any pending invincibility."""
        self.game_over = False
        self.score = 0
        self.is_invincible = False
        self.invincible_until = None
        self.difficulty = difficulty_for_score(0, self._difficulty_settings)
        self.last_spawn_time = 0.0

    # Score and difficulty
    def record_pass(self) -> None:
        """Credit one passed pipe."""
        self.score += 1
        self._emit(EventType.SCORE_CHANGED, {"score": self.score})
        self.update_high_score()
        self.increase_difficulty()

    def update_high_score(self) -> bool:
        """Raise the high score if beaten. Returns True when it changed."""
        if self.score <= self.high_score:
            return False
        self.high_score = self.score
        logger.debug(f"New high score: {self.high_score}")
        self._emit(EventType.HIGH_SCORE, {"high_score": self.high_score})
        return True

    def increase_difficulty(self) -> None:
        """Recompute difficulty from the current score."""
        self.difficulty = difficulty_for_score(self.score, self._difficulty_settings)

    # Terminal state
    def end_game(self, reason: str = "collision") -> None:
        """Enter the terminal state. Only the first call publishes."""
        if self.game_over:
            return
        self.game_over = True
        logger.info(f"Game over ({reason}) at score {self.score}")
        self._emit(EventType.GAME_OVER, {"reason": reason, "score": self.score})

    # Invincibility window
    def activate_invincibility(self, now_ms: float, duration_ms: float) -> None:
        """Start (or restart) the invincibility window.

        A pickup while already invincible replaces the expiry, so the
        window always ends ``duration_ms`` after the latest pickup.
        """
        restarted = self.is_invincible
        self.is_invincible = True
        self.invincible_until = now_ms + duration_ms
        self._emit(
            EventType.INVINCIBILITY_STARTED,
            {"until": self.invincible_until, "restarted": restarted},
        )

    def expire_invincibility(self, now_ms: float) -> bool:
        """Clear invincibility once its window has passed.

        Returns:
            True if the window ended on this call
        """
        if not self.is_invincible or self.invincible_until is None:
            return False
        if now_ms < self.invincible_until:
            return False
        self.cancel_invincibility()
        self._emit(EventType.INVINCIBILITY_ENDED, {"at": now_ms})
        return True

    def cancel_invincibility(self) -> None:
        """Drop invincibility and its pending expiry."""
        self.is_invincible = False
        self.invincible_until = None

    def _emit(self, event_type: EventType, data: dict) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(Event(event_type, data=data, source=self.source))
