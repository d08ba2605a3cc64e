"""
Dudo - State Snapshots

Builds the views published to the rendering layer from the match aggregate.
Views are detached copies: mutating them never touches the match.
"""

from dataclasses import asdict

from dudo.engine.base import MatchState
from dudo.engine.turns import TurnSequencer
from dudo.views.models import PlayerPrivateView, PlayerStateView, PublicStateView


def build_public_view(state: MatchState) -> PublicStateView:
    """Snapshot of the public board."""
    data = asdict(state.public)
    data["active_players"] = TurnSequencer.active_players(state.public, state.has_ended)
    data["has_ended"] = state.has_ended
    data["ranks"] = dict(state.ranks) if state.ranks is not None else None
    return PublicStateView.model_validate(data)


def build_player_view(state: MatchState, player_id: str) -> PlayerStateView:
    """
    Snapshot for one player: the public board plus their own private info.

    Raises:
        KeyError: If the player is not in the match
    """
    private = state.private[player_id]
    public = build_public_view(state)
    return PlayerStateView(
        player_id=player_id,
        public=public,
        private=PlayerPrivateView.model_validate(asdict(private)),
        its_your_turn=player_id in public.active_players,
    )
