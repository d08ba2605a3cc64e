"""
Dudo - Game Engine

Entry points of the rules engine: match creation and the three moves
(bet, challenge, roll). Every move has a `can_*` gate; a refused move
leaves the state untouched and returns None.

All methods are stateless class methods. The match aggregate is passed in
and mutated in place; it must not be shared between concurrent moves.
"""

import logging
from typing import Mapping, Sequence

from dudo.engine.base import (
    Bet,
    ChallengeResult,
    MatchConfig,
    MatchPublicState,
    MatchState,
    PlayerPrivateInfo,
    PlayerPublicInfo,
    RollResult,
    Step,
)
from dudo.engine.bets import is_new_bet_valid
from dudo.engine.random_source import RandomSource
from dudo.engine.resolver import RoundResolver
from dudo.engine.rolls import RollSynchronizer
from dudo.engine.turns import TurnSequencer
from dudo.engine.validators import validate_colors, validate_player_ids, validate_start_num_dice

logger = logging.getLogger(__name__)


class DudoEngine:
    """Stateless Dudo rules engine."""

    @classmethod
    def create_state(
        cls,
        player_ids: Sequence[str],
        random_source: RandomSource,
        start_num_dice: int,
        colors: Mapping[str, int] | None = None,
    ) -> MatchState:
        """
        Set up a new match.

        The seating order is shuffled once, then every player rolls their
        first dice in seating order. The first seat opens the betting.

        Args:
            player_ids: Participants (2-7 unique ids)
            random_source: Source of the shuffle and of every roll
            start_num_dice: Dice per player (3-6)
            colors: Optional color slot per player

        Returns:
            The new match aggregate

        Raises:
            ValueError: If the configuration is invalid
        """
        ids = validate_player_ids(player_ids)
        config = MatchConfig(
            start_num_dice=validate_start_num_dice(start_num_dice),
            num_players=len(ids),
        )
        color_by_player = validate_colors(colors, ids)

        player_order = random_source.shuffled(ids)

        players: dict[str, PlayerPublicInfo] = {}
        private: dict[str, PlayerPrivateInfo] = {}
        for player_id in player_order:
            players[player_id] = PlayerPublicInfo(color_index=color_by_player[player_id])
            private[player_id] = PlayerPrivateInfo(
                num_dice_remaining=config.start_num_dice,
                dice_values=list(random_source.d6(config.start_num_dice)),
            )

        board = MatchPublicState(
            start_num_dice=config.start_num_dice,
            player_order=list(player_order),
            players=players,
        )
        return MatchState(public=board, private=private)

    # -- Bet -------------------------------------------------------------

    @classmethod
    def can_bet(cls, state: MatchState, player_id: str, quantity: int, face: int) -> bool:
        """The current player may bid during betting, if the bid is a legal raise."""
        board = state.public
        if state.has_ended or board.step is not Step.BETTING:
            return False
        if not TurnSequencer.is_current_player(board, player_id):
            return False
        if type(quantity) is not int or type(face) is not int:
            return False

        return is_new_bet_valid(
            board.bet,
            Bet(quantity, face),
            board.palifico,
            state.private[player_id].num_dice_remaining,
        )

    @classmethod
    def bet(cls, state: MatchState, player_id: str, quantity: int, face: int) -> Bet | None:
        """
        Place a bid and pass the turn.

        Returns:
            The new bid, or None if refused
        """
        if not cls.can_bet(state, player_id, quantity, face):
            logger.debug("Refused bet %s x %s from %s", quantity, face, player_id)
            return None

        new_bet = Bet(quantity, face)
        state.public.bet = new_bet
        TurnSequencer.advance_turn(state.public)
        return new_bet

    # -- Challenge ---------------------------------------------------------

    @classmethod
    def can_challenge(cls, state: MatchState, player_id: str) -> bool:
        return RoundResolver.can_challenge(state, player_id)

    @classmethod
    def challenge(cls, state: MatchState, player_id: str) -> ChallengeResult | None:
        """Call the current bid. Returns None if refused."""
        result = RoundResolver.resolve_challenge(state, player_id)
        if result is None:
            logger.debug("Refused challenge from %s", player_id)
        return result

    # -- Roll ------------------------------------------------------------

    @classmethod
    def can_roll(cls, state: MatchState, player_id: str) -> bool:
        return RollSynchronizer.can_roll(state, player_id)

    @classmethod
    def roll(
        cls,
        state: MatchState,
        player_id: str,
        random_source: RandomSource,
    ) -> RollResult | None:
        """Roll for the next round. Returns None if refused."""
        result = RollSynchronizer.roll(state, player_id, random_source)
        if result is None:
            logger.debug("Refused roll from %s", player_id)
        return result
