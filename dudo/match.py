"""
Dudo - Match

Host-facing wrapper around one match: owns the match aggregate, the random
source and the event listeners. The host runtime serializes moves; each
move is applied fully before the next one is considered.

Example:
    match = DudoMatch.create(["ana", "ben", "cleo"], start_num_dice=5)
    match.bet(match.current_player, 3, 4)
    match.challenge(match.current_player)
    for player_id in match.active_players:
        match.roll(player_id)
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Sequence

from dudo.config.settings import get_settings
from dudo.engine.base import Bet, ChallengeResult, MatchState, RollResult
from dudo.engine.game import DudoEngine
from dudo.engine.random_source import DefaultRandomSource, RandomSource
from dudo.engine.rolls import RollSynchronizer
from dudo.engine.turns import TurnSequencer
from dudo.events.dispatcher import EventDispatcher
from dudo.events.events import EventPayload, MatchEvent
from dudo.views.models import PlayerStateView, PublicStateView
from dudo.views.snapshot import build_player_view, build_public_view

logger = logging.getLogger(__name__)


class DudoMatch:
    """A single Dudo match and its collaborators."""

    def __init__(
        self,
        state: MatchState,
        random_source: RandomSource,
        dispatcher: EventDispatcher | None = None,
    ) -> None:
        self._state = state
        self._random = random_source
        self._dispatcher = dispatcher or EventDispatcher()

    @classmethod
    def create(
        cls,
        player_ids: Sequence[str],
        *,
        random_source: RandomSource | None = None,
        start_num_dice: int | None = None,
        colors: Mapping[str, int] | None = None,
        on_event: Callable[[EventPayload], None] | None = None,
    ) -> DudoMatch:
        """
        Start a new match.

        Missing options fall back to the settings (`DUDO_START_NUM_DICE`,
        `DUDO_RANDOM_SEED`).

        Raises:
            ValueError: If the configuration is invalid
        """
        if random_source is None or start_num_dice is None:
            settings = get_settings()
            if random_source is None:
                random_source = DefaultRandomSource(settings.random_seed)
            if start_num_dice is None:
                start_num_dice = settings.start_num_dice

        state = DudoEngine.create_state(player_ids, random_source, start_num_dice, colors)
        match = cls(state, random_source)
        if on_event is not None:
            match.subscribe(on_event)

        logger.info(
            "Created match for %d players with %d dice each, order %s",
            len(state.public.player_order), start_num_dice, state.public.player_order,
        )
        match._emit(
            MatchEvent.MATCH_STARTED,
            player_id=state.public.current_player,
            player_order=list(state.public.player_order),
            start_num_dice=start_num_dice,
        )
        return match

    # -- State access ----------------------------------------------------

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def current_player(self) -> str:
        return self._state.public.current_player

    @property
    def active_players(self) -> list[str]:
        """Players expected to act now."""
        return TurnSequencer.active_players(self._state.public, self._state.has_ended)

    @property
    def has_ended(self) -> bool:
        return self._state.has_ended

    @property
    def ranks(self) -> dict[str, int] | None:
        """Final rank per player (0 = winner), once the match is over."""
        return dict(self._state.ranks) if self._state.ranks is not None else None

    def public_view(self) -> PublicStateView:
        return build_public_view(self._state)

    def player_view(self, player_id: str) -> PlayerStateView:
        return build_player_view(self._state, player_id)

    # -- Listeners -------------------------------------------------------

    def subscribe(self, on_event: Callable[[EventPayload], None]) -> None:
        self._dispatcher.subscribe(on_event)

    def unsubscribe(self, on_event: Callable[[EventPayload], None]) -> None:
        self._dispatcher.unsubscribe(on_event)

    def _emit(self, event: MatchEvent, player_id: str | None = None, **data) -> None:
        self._dispatcher.emit(EventPayload(event=event, player_id=player_id, data=data))

    # -- Moves -----------------------------------------------------------

    def can_bet(self, player_id: str, quantity: int, face: int) -> bool:
        return DudoEngine.can_bet(self._state, player_id, quantity, face)

    def bet(self, player_id: str, quantity: int, face: int) -> bool:
        """Bid `quantity` dice showing `face`. Returns False if refused."""
        new_bet: Bet | None = DudoEngine.bet(self._state, player_id, quantity, face)
        if new_bet is None:
            return False

        self._emit(MatchEvent.BET_PLACED, player_id, quantity=new_bet.quantity, face=new_bet.face)
        self._emit(MatchEvent.TURN_ADVANCED, self.current_player)
        return True

    def can_challenge(self, player_id: str) -> bool:
        return DudoEngine.can_challenge(self._state, player_id)

    def challenge(self, player_id: str) -> bool:
        """Call the current bid. Returns False if refused."""
        result: ChallengeResult | None = DudoEngine.challenge(self._state, player_id)
        if result is None:
            return False

        self._emit(
            MatchEvent.DUDO_CALLED,
            player_id,
            bidder=result.bidder,
            quantity=result.bet.quantity,
            face=result.bet.face,
            actual_count=result.actual_count,
            loser=result.loser,
        )
        if result.eliminated:
            self._emit(MatchEvent.PLAYER_ELIMINATED, result.loser)
        if result.winner is not None:
            self._emit(MatchEvent.MATCH_WON, result.winner, ranks=dict(result.ranks))
        return True

    def can_roll(self, player_id: str) -> bool:
        return DudoEngine.can_roll(self._state, player_id)

    def roll(self, player_id: str) -> bool:
        """Roll for the next round. Returns False if refused."""
        return self._after_roll(DudoEngine.roll(self._state, player_id, self._random))

    def begin_roll(self, player_id: str) -> bool:
        """
        Acknowledge a roll request without drawing the dice yet.

        Lets a host show the roll as pending before `complete_roll`.
        """
        return RollSynchronizer.begin_roll(self._state, player_id)

    def complete_roll(self, player_id: str) -> bool:
        """Draw the dice of a pending roll. Returns False if none is pending."""
        return self._after_roll(
            RollSynchronizer.complete_roll(self._state, player_id, self._random)
        )

    def _after_roll(self, result: RollResult | None) -> bool:
        if result is None:
            return False

        self._emit(MatchEvent.DICE_ROLLED, result.player_id, num_dice=len(result.dice_values))
        if result.round_started:
            self._emit(
                MatchEvent.ROUND_STARTED,
                self.current_player,
                palifico=result.palifico,
            )
        return True
