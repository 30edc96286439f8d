"""Simulation core: state, events, pooling, persistence hook."""

from skygate.core.difficulty import difficulty_for_score, spawn_interval
from skygate.core.events import Event, EventBus, EventType
from skygate.core.highscore import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore
from skygate.core.pool import ObjectPool
from skygate.core.state import GameState

__all__ = [
    "difficulty_for_score",
    "spawn_interval",
    "Event",
    "EventBus",
    "EventType",
    "HighScoreStore",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
    "ObjectPool",
    "GameState",
]
