"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Geometry is validated up front so the spawn code never sees a degenerate
pipe range.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PhysicsSettings(BaseModel):
    """Per-tick bird physics."""

    gravity: float = Field(default=0.5, gt=0.0)
    jump_force: float = Field(default=-8.0, lt=0.0)  # negative is upward
    max_velocity: float = Field(default=10.0, gt=0.0)


class BirdSettings(BaseModel):
    """Bird size and hitbox."""

    width: float = Field(default=34.0, gt=0.0)
    height: float = Field(default=24.0, gt=0.0)
    collision_margin: float = Field(default=5.0, ge=0.0)

    @model_validator(mode="after")
    def _check_margin(self) -> "BirdSettings":
        if self.collision_margin * 2 >= min(self.width, self.height):
            raise ValueError(
                f"collision_margin {self.collision_margin} leaves no hitbox "
                f"for a {self.width}x{self.height} bird"
            )
        return self


class PipeSettings(BaseModel):
    """Pipe geometry and cadence."""

    width: float = Field(default=52.0, gt=0.0)
    gap: float = Field(default=150.0, gt=0.0)
    speed: float = Field(default=2.0, gt=0.0)  # pixels per tick at 1.0x
    spawn_interval: float = Field(default=3000.0, gt=0.0)  # milliseconds
    min_height: float = Field(default=50.0, ge=0.0)


class PowerUpSettings(BaseModel):
    """Invincibility star."""

    size: float = Field(default=30.0, gt=0.0)
    duration: float = Field(default=5000.0, gt=0.0)  # milliseconds
    spawn_chance: float = Field(default=0.3, ge=0.0, le=1.0)
    spikes: int = Field(default=5, ge=3)


class FieldSettings(BaseModel):
    """Play field geometry."""

    width: int = Field(default=800, gt=0)
    height: int = Field(default=600, gt=0)

    # Ground band drawn by the renderer
    terrain_height: float = Field(default=60.0, ge=0.0)
    grass_height: float = Field(default=27.0, ge=0.0)

    @property
    def ground_inset(self) -> float:
        """Bottom band that pipe gaps must stay clear of."""
        return self.terrain_height + self.grass_height


class PoolSettings(BaseModel):
    """Pre-allocated pool sizes."""

    max_pipes: int = Field(default=4, ge=1)
    max_powerups: int = Field(default=3, ge=1)


class DifficultySettings(BaseModel):
    """Score to speed multiplier curve."""

    step_scores: int = Field(default=20, gt=0)
    step_increase: float = Field(default=0.2, gt=0.0)
    max_multiplier: float = Field(default=2.0, ge=1.0)


class SimulatorSettings(BaseModel):
    """Desktop simulator window."""

    title: str = "SKYGATE"
    fps: int = Field(default=60, gt=0)
    fullscreen: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SKYGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    seed: int | None = None

    # Paths
    data_path: Path = Field(default_factory=lambda: Path.home() / ".skygate")

    # Nested settings
    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    bird: BirdSettings = Field(default_factory=BirdSettings)
    pipes: PipeSettings = Field(default_factory=PipeSettings)
    powerups: PowerUpSettings = Field(default_factory=PowerUpSettings)
    field: FieldSettings = Field(default_factory=FieldSettings)
    pools: PoolSettings = Field(default_factory=PoolSettings)
    difficulty: DifficultySettings = Field(default_factory=DifficultySettings)
    simulator: SimulatorSettings = Field(default_factory=SimulatorSettings)

    @model_validator(mode="after")
    def _check_spawn_range(self) -> "Settings":
        low, high = self.pipe_top_range
        if high <= low:
            raise ValueError(
                f"Field {self.field.width}x{self.field.height} with gap "
                f"{self.pipes.gap}, min height {self.pipes.min_height} and "
                f"ground inset {self.field.ground_inset} leaves no room "
                f"for pipes (top range {low}..{high})"
            )
        if self.bird.height >= self.field.height:
            raise ValueError("Bird is taller than the play field")
        return self

    @property
    def pipe_top_range(self) -> tuple[float, float]:
        """Bounds for a pipe's top segment height."""
        low = self.pipes.min_height
        high = (
            self.field.height
            - self.pipes.gap
            - self.pipes.min_height
            - self.field.ground_inset
        )
        return low, high

    @property
    def high_score_file(self) -> Path:
        """JSON file holding the persisted high score."""
        return self.data_path / "highscore.json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
