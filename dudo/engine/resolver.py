"""
Dudo - Round Resolution

Resolves a challenge ("Dudo!") on the current bid: reveals every hidden die,
counts the dice matching the bid, takes a die from the loser, eliminates
players with no dice left and ends the match when a single player remains.
"""

import logging
from typing import Iterable, Sequence

from dudo.engine.base import WILD_FACE, ChallengeResult, MatchPublicState, MatchState, Step

logger = logging.getLogger(__name__)


class RoundResolver:
    """Stateless challenge resolution operating on the match aggregate."""

    @classmethod
    def can_challenge(cls, state: MatchState, player_id: str) -> bool:
        """Only the current player may call, and only on an existing bid."""
        board = state.public
        return (
            not state.has_ended
            and board.step is Step.BETTING
            and board.bet is not None
            and board.previous_player_index is not None
            and board.current_player == player_id
        )

    @classmethod
    def count_matching(
        cls,
        hands: Iterable[Sequence[int]],
        face: int,
        palifico: bool,
    ) -> int:
        """
        Count dice matching `face` across all hands.

        1s are wild outside palifico rounds. A bid on 1s counts each 1 once.
        """
        return sum(
            1
            for hand in hands
            for value in hand
            if value == face or (not palifico and value == WILD_FACE)
        )

    @classmethod
    def determine_loser(cls, board: MatchPublicState, actual_count: int) -> str:
        """The caller loses if the bid held, the bidder loses otherwise."""
        if actual_count >= board.bet.quantity:
            return board.current_player
        return board.previous_player

    @classmethod
    def find_winner(cls, state: MatchState, loser: str) -> str | None:
        """
        Winner of the match once `loser` gives up a die, if any.

        The loser counts as eliminated when this is their last die.
        """
        survivors = [
            player_id for player_id in state.public.alive_players
            if not (player_id == loser and state.private[player_id].num_dice_remaining == 1)
        ]
        if len(survivors) == 1:
            return survivors[0]
        return None

    @classmethod
    def compute_ranks(cls, winner: str, death_list: Sequence[str]) -> dict[str, int]:
        """
        Final ranks: 0 for the winner, then by reverse elimination order.

        The last player eliminated ranks 1, the first one ranks len(death_list).
        """
        ranks = {winner: 0}
        for i, player_id in enumerate(death_list):
            ranks[player_id] = len(death_list) - i
        return ranks

    @classmethod
    def resolve_challenge(cls, state: MatchState, player_id: str) -> ChallengeResult | None:
        """
        Resolve a challenge by `player_id` on the current bid.

        Args:
            state: Match aggregate, mutated in place
            player_id: Player calling the bid

        Returns:
            ChallengeResult, or None if the challenge is not allowed
        """
        if not cls.can_challenge(state, player_id):
            return None

        board = state.public
        bet = board.bet
        bidder = board.previous_player
        alive = board.alive_players

        actual_count = cls.count_matching(
            (state.private[p].dice_values for p in alive),
            bet.face,
            board.palifico,
        )
        loser = cls.determine_loser(board, actual_count)
        winner = cls.find_winner(state, loser)

        loser_info = state.private[loser]
        loser_info.num_dice_remaining -= 1

        for p in alive:
            board.players[p].dice_values = list(state.private[p].dice_values)

        eliminated = loser_info.num_dice_remaining == 0
        if eliminated:
            board.players[loser].is_alive = False
            board.death_list.append(loser)
            # Their last die stays visible on the board until the next round.
            loser_info.dice_values = []

        for info in board.players.values():
            info.has_rolled = False

        board.step = Step.REVEALED
        board.loser = loser
        board.winner = winner
        board.actual_count = actual_count

        logger.info(
            "Challenge by %s on %s from %s: counted %d, %s loses a die",
            player_id, bet, bidder, actual_count, loser,
        )

        ranks = None
        if winner is not None:
            ranks = cls.compute_ranks(winner, board.death_list)
            state.ranks = ranks
            logger.info("Match won by %s, ranks %s", winner, ranks)

        return ChallengeResult(
            bet=bet,
            challenger=player_id,
            bidder=bidder,
            actual_count=actual_count,
            loser=loser,
            eliminated=eliminated,
            winner=winner,
            ranks=ranks,
        )
