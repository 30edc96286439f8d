"""Frame-driven game loop."""

from skygate.game.loop import GameLoop

__all__ = ["GameLoop"]
