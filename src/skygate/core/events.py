"""
Event bus system for SKYGATE.

Provides synchronous pub/sub messaging between the simulation core and
its collaborators (input wiring, high-score storage, HUD).
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    BUTTON_PRESS = auto()
    BUTTON_RELEASE = auto()

    # Game events
    SCORE_CHANGED = auto()
    HIGH_SCORE = auto()
    GAME_OVER = auto()
    POWERUP_COLLECTED = auto()
    INVINCIBILITY_STARTED = auto()
    INVINCIBILITY_ENDED = auto()
    SESSION_RESET = auto()

    # Capacity signal
    POOL_OVERFLOW = auto()

    # System events
    TICK = auto()  # Frame tick
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    Handlers run synchronously inside ``emit`` so everything a tick
    publishes is delivered before the tick returns.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """
        Subscribe to all events.

        Args:
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event immediately."""
        self._add_to_history(event)

        handlers = self._handlers.get(event.type, []) + self._global_handlers
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type}: {e}")

    def _add_to_history(self, event: Event) -> None:
        """Add event to history, maintaining limit."""
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(
        self,
        event_type: EventType | str | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]


# Convenience functions for creating common events
def button_press_event(source: str = "button") -> Event:
    """Create a button press event."""
    return Event(EventType.BUTTON_PRESS, source=source)


def button_release_event(source: str = "button") -> Event:
    """Create a button release event."""
    return Event(EventType.BUTTON_RELEASE, source=source)


def tick_event(now_ms: float, frame: int) -> Event:
    """Create a frame tick event."""
    return Event(EventType.TICK, data={"now_ms": now_ms, "frame": frame})
