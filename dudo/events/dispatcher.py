"""
Dudo - Event Dispatch

Fans match events out to the callbacks registered by the host runtime.
Callbacks run synchronously, after the move is fully applied.
"""

from __future__ import annotations

import logging
from typing import Callable

from dudo.events.events import EventPayload

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Registry of event callbacks for a single match."""

    def __init__(self) -> None:
        self._listeners: list[Callable[[EventPayload], None]] = []

    def subscribe(self, on_event: Callable[[EventPayload], None]) -> None:
        """Register a callback. Registering the same callback twice is a no-op."""
        if on_event in self._listeners:
            logger.warning("Listener %r already subscribed", on_event)
            return
        self._listeners.append(on_event)

    def unsubscribe(self, on_event: Callable[[EventPayload], None]) -> None:
        """Remove a callback, if registered."""
        if on_event in self._listeners:
            self._listeners.remove(on_event)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self, payload: EventPayload) -> None:
        """
        Deliver an event to every listener.

        A failing listener is logged and does not prevent delivery to the
        others: the move behind the event has already been applied.
        """
        for on_event in list(self._listeners):
            try:
                on_event(payload)
            except Exception:
                logger.exception("Error in listener for %s", payload.event.name)
