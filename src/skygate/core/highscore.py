"""High score persistence.

The core only needs ``load()`` at startup and ``save()`` when the record
moves. Where the number lives is up to the store.
"""

from pathlib import Path
from typing import Protocol
import json
import logging

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    """Persistence hook for the high score."""

    def load(self) -> int:
        ...

    def save(self, score: int) -> None:
        ...


class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process."""

    def __init__(self, initial: int = 0) -> None:
        self.value = initial
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        self.value = score
        self.saves += 1


class JsonHighScoreStore:
    """Stores the high score in a small JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Read the stored score, 0 if missing or unreadable."""
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            score = int(data.get("high_score", 0))
            logger.info(f"Loaded high score {score} from {self.path}")
            return max(0, score)
        except Exception as e:
            logger.error(f"Failed to load high score: {e}")
            return 0

    def save(self, score: int) -> None:
        """Write the score, creating the parent directory if needed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump({"high_score": int(score)}, f, indent=2)
        except Exception as e:
            logger.error(f"Failed to save high score: {e}")
