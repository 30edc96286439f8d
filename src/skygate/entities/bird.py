"""The player's bird: gravity, flap impulse, field bounds, collisions."""

from typing import Iterable, Literal, Tuple
import logging

from skygate.core.pool import ObjectPool
from skygate.core.state import GameState
from skygate.entities.pipe import Pipe
from skygate.entities.powerup import PowerUp
from skygate.settings import BirdSettings, FieldSettings, PhysicsSettings, PowerUpSettings

logger = logging.getLogger(__name__)

WingPose = Literal["up", "mid", "down"]


class Bird:
    """
    Player avatar.

    Physics is per tick: gravity is added to velocity (capped at
    ``max_velocity``) and velocity to ``y``. ``x`` never changes during a
    session. After every update ``y`` stays within
    ``[height / 2, field.height - height / 2]``.
    """

    def __init__(
        self,
        physics: PhysicsSettings,
        settings: BirdSettings,
        field: FieldSettings,
        powerups: PowerUpSettings,
    ) -> None:
        self.physics = physics
        self.settings = settings
        self.field = field
        self.powerup_duration = powerups.duration
        self.width = settings.width
        self.height = settings.height
        self.x = 0.0
        self.y = 0.0
        self.velocity = 0.0
        self.reset()

    def reset(self) -> None:
        """Re-center for a new session."""
        self.x = self.field.width / 3
        self.y = self.field.height / 2
        self.velocity = 0.0

    @property
    def hitbox(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) shrunk by the collision margin."""
        half_w = (self.width - self.settings.collision_margin * 2) / 2
        half_h = (self.height - self.settings.collision_margin * 2) / 2
        return (self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h)

    @property
    def wing_pose(self) -> WingPose:
        if self.velocity < -3:
            return "up"
        if self.velocity > 3:
            return "down"
        return "mid"

    @property
    def tilt(self) -> float:
        """Body rotation in radians, nose down when falling."""
        return min(max(self.velocity * 0.1, -0.5), 0.5)

    def flap(self, state: GameState) -> None:
        """Upward impulse. Ignored once the game is over."""
        if not state.game_over:
            self.velocity = self.physics.jump_force

    def integrate(self, state: GameState) -> None:
        """Apply gravity and clamp to the field."""
        if state.game_over:
            return

        self.velocity = min(self.velocity + self.physics.gravity, self.physics.max_velocity)
        self.y += self.velocity

        # Ground is terminal
        if self.y + self.height / 2 > self.field.height:
            self.y = self.field.height - self.height / 2
            self.velocity = 0.0
            state.end_game("ground")

        # Ceiling only blocks
        if self.y - self.height / 2 < 0:
            self.y = self.height / 2
            self.velocity = max(self.velocity, 0.0)

    def resolve_collisions(
        self,
        state: GameState,
        pipes: Iterable[Pipe],
        powerups: ObjectPool[PowerUp],
        now_ms: float,
    ) -> int:
        """Check the active pipes and power-ups against this bird.

        Returns:
            Number of power-ups picked up
        """
        collected = 0
        if not state.is_invincible:
            for pipe in pipes:
                if pipe.collides_with(self):
                    state.end_game("pipe")
                    break

        for powerup in powerups.active:
            if powerup.collides_with(self):
                logger.debug(f"Power-up collected at ({powerup.x:.0f}, {powerup.y:.0f})")
                state.activate_invincibility(now_ms, self.powerup_duration)
                powerups.release(powerup)
                collected += 1
        return collected

    def update(
        self,
        state: GameState,
        pipes: Iterable[Pipe],
        powerups: ObjectPool[PowerUp],
        now_ms: float,
    ) -> int:
        """One tick: physics, then collisions. Returns power-ups picked up."""
        if state.game_over:
            return 0
        self.integrate(state)
        return self.resolve_collisions(state, pipes, powerups, now_ms)
