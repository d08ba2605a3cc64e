"""
Dudo - Match Event Definitions

Event types and payloads emitted to the host runtime as moves are applied,
plus classification of changes between two published public snapshots for
hosts that poll the state instead of listening.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class MatchEvent(Enum):
    """Events that can occur during a match."""

    MATCH_STARTED = auto()
    BET_PLACED = auto()
    DUDO_CALLED = auto()
    PLAYER_ELIMINATED = auto()
    DICE_ROLLED = auto()
    ROUND_STARTED = auto()
    TURN_ADVANCED = auto()
    MATCH_WON = auto()
    STATE_UPDATED = auto()


@dataclass
class EventPayload:
    """Wrapper for match event data. Never carries hidden dice."""

    event: MatchEvent
    player_id: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


# Step transitions of the public board
_STEP_EVENT_MAP: dict[tuple[str, str], MatchEvent] = {
    ("betting", "revealed"): MatchEvent.DUDO_CALLED,
    ("revealed", "betting"): MatchEvent.ROUND_STARTED,
}


def _step(snapshot: dict[str, Any]) -> str | None:
    step = snapshot.get("step")
    return getattr(step, "value", step)


def _rolled_flags(snapshot: dict[str, Any]) -> dict[str, bool]:
    players = snapshot.get("players", {})
    return {player_id: info.get("has_rolled") for player_id, info in players.items()}


def classify_public_change(
    old_snapshot: dict[str, Any], new_snapshot: dict[str, Any]
) -> MatchEvent | None:
    """
    Determine the most significant event between two public snapshots.

    Snapshots are dumps of the public view (`PublicStateView.model_dump()`).

    Returns:
        The event, or None if nothing changed
    """
    if old_snapshot == new_snapshot:
        return None

    if new_snapshot.get("winner") and not old_snapshot.get("winner"):
        return MatchEvent.MATCH_WON

    step_change = (_step(old_snapshot), _step(new_snapshot))
    if step_change in _STEP_EVENT_MAP:
        return _STEP_EVENT_MAP[step_change]

    if len(new_snapshot.get("death_list", [])) > len(old_snapshot.get("death_list", [])):
        return MatchEvent.PLAYER_ELIMINATED
    if new_snapshot.get("bet") != old_snapshot.get("bet"):
        return MatchEvent.BET_PLACED
    if _rolled_flags(new_snapshot) != _rolled_flags(old_snapshot):
        return MatchEvent.DICE_ROLLED
    if new_snapshot.get("current_player_index") != old_snapshot.get("current_player_index"):
        return MatchEvent.TURN_ADVANCED

    return MatchEvent.STATE_UPDATED
