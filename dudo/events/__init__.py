"""
Dudo Match Events.

Events emitted while a match is played and change classification for
published snapshots.
"""

from dudo.events.dispatcher import EventDispatcher
from dudo.events.events import EventPayload, MatchEvent, classify_public_change

__all__ = [
    "EventDispatcher",
    "EventPayload",
    "MatchEvent",
    "classify_public_change",
]
