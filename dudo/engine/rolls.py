"""
Dudo - Roll Synchronization

After a challenge every living player rolls their remaining dice. The next
round only starts once the last of them has rolled; that roll seats the
loser of the previous round (or the next living player) and decides whether
the new round is a palifico round.
"""

import logging

from dudo.engine.base import MatchState, RollResult, Step
from dudo.engine.random_source import RandomSource
from dudo.engine.turns import TurnSequencer

logger = logging.getLogger(__name__)


class RollSynchronizer:
    """Stateless roll handling operating on the match aggregate."""

    @classmethod
    def can_roll(cls, state: MatchState, player_id: str) -> bool:
        """A living player may roll once per round, while the dice are revealed."""
        board = state.public
        info = board.players.get(player_id)
        return (
            info is not None
            and not state.has_ended
            and board.step is Step.REVEALED
            and info.is_alive
            and not info.has_rolled
        )

    @classmethod
    def everyone_rolled(cls, state: MatchState) -> bool:
        """Whether every living player has finished rolling, pending rolls excluded."""
        return all(
            info.has_rolled and not state.private[player_id].is_rolling
            for player_id, info in state.public.players.items()
            if info.is_alive
        )

    @classmethod
    def begin_roll(cls, state: MatchState, player_id: str) -> bool:
        """
        Acknowledge a roll request.

        Returns:
            False if the player may not roll now
        """
        if not cls.can_roll(state, player_id):
            return False

        state.private[player_id].is_rolling = True
        state.public.players[player_id].has_rolled = True
        return True

    @classmethod
    def complete_roll(
        cls,
        state: MatchState,
        player_id: str,
        random_source: RandomSource,
    ) -> RollResult | None:
        """
        Draw the dice of a pending roll, then start the next round if this
        was the last roll missing.

        Returns:
            RollResult, or None if no roll is pending for the player
        """
        private = state.private.get(player_id)
        if private is None or not private.is_rolling or state.public.step is not Step.REVEALED:
            return None

        dice_values = random_source.d6(private.num_dice_remaining)
        private.dice_values = list(dice_values)
        private.is_rolling = False
        logger.debug("%s rolled %d dice", player_id, len(dice_values))

        if not cls.everyone_rolled(state):
            return RollResult(player_id=player_id, dice_values=tuple(dice_values))

        palifico = cls.start_next_round(state)
        return RollResult(
            player_id=player_id,
            dice_values=tuple(dice_values),
            round_started=True,
            palifico=palifico,
        )

    @classmethod
    def roll(
        cls,
        state: MatchState,
        player_id: str,
        random_source: RandomSource,
    ) -> RollResult | None:
        """Request and complete a roll in one step."""
        if not cls.begin_roll(state, player_id):
            return None
        return cls.complete_roll(state, player_id, random_source)

    @classmethod
    def start_next_round(cls, state: MatchState) -> bool:
        """
        Turn the revealed round over into a new betting round.

        Palifico only applies when the loser just went down to their last die
        and more than two players are still in. The loser opens the round, or
        the next living player if the loser is out.

        Returns:
            Whether the new round is a palifico round
        """
        board = state.public
        loser = board.loser
        loser_info = state.private[loser]

        board.palifico = loser_info.num_dice_remaining == 1 and len(board.alive_players) > 2
        board.step = Step.BETTING

        board.current_player_index = board.player_order.index(loser)
        if not board.players[loser].is_alive:
            TurnSequencer.advance_turn(board)
        board.previous_player_index = None

        for info in board.players.values():
            info.dice_values = None

        if loser_info.num_dice_remaining == 0:
            loser_info.dice_values = []

        board.loser = None
        board.bet = None

        logger.info(
            "New round opened by %s%s",
            board.current_player, " (palifico)" if board.palifico else "",
        )
        return board.palifico
