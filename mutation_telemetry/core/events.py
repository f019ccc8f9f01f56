"""In-process events used to hand records to exporters."""

import logging
from typing import Callable, Dict, Generic, TypeVar

T = TypeVar("T")

EventListener = Callable[[str, T], None]

logger = logging.getLogger(__name__)


class Event(Generic[T]):
    """Named listeners called synchronously, in registration order, with each dispatched value.

    A listener that raises is logged and skipped; it never affects the caller
    of `dispatch` or the listeners after it.
    """

    def __init__(self, event_type: str) -> None:
        self.event_type = event_type
        self._listeners: Dict[str, EventListener[T]] = {}

    def register(self, name: str, listener: EventListener[T]) -> None:
        """Register a listener under `name`, replacing any listener of the same name."""
        self._listeners[name] = listener

    def unregister(self, name: str) -> None:
        """Raises KeyError if no listener has that name."""
        del self._listeners[name]

    def dispatch(self, data: T) -> None:
        # Iterate a copy so listeners may unregister themselves
        for name, listener in list(self._listeners.items()):
            try:
                listener(self.event_type, data)
            except Exception:
                logger.exception(f"Listener {name} failed handling {self.event_type}")
