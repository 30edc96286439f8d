"""Game entities."""

from skygate.entities.bird import Bird
from skygate.entities.pipe import Pipe
from skygate.entities.powerup import PowerUp

__all__ = ["Bird", "Pipe", "PowerUp"]
