"""
Dudo - Turn Sequencing

Whose turn it is, skipping eliminated players. Seating order is fixed for
the whole match; turns move forward around the table.
"""

from dudo.engine.base import MatchPublicState, Step


class TurnSequencer:
    """Stateless turn logic operating on the public board."""

    @classmethod
    def next_alive_index(cls, board: MatchPublicState, start_index: int) -> int:
        """
        First living seat strictly after `start_index`, wrapping around.

        Raises:
            ValueError: If nobody is alive
        """
        num_seats = len(board.player_order)
        for offset in range(1, num_seats + 1):
            index = (start_index + offset) % num_seats
            if board.players[board.player_order[index]].is_alive:
                return index
        raise ValueError("No living player left to take the turn.")

    @classmethod
    def advance_turn(cls, board: MatchPublicState) -> int:
        """
        Pass the turn to the next living player.

        The player who just acted becomes the previous player.

        Returns:
            The new current player index
        """
        next_index = cls.next_alive_index(board, board.current_player_index)
        board.previous_player_index = board.current_player_index
        board.current_player_index = next_index
        return next_index

    @classmethod
    def is_current_player(cls, board: MatchPublicState, player_id: str) -> bool:
        return board.current_player == player_id

    @classmethod
    def active_players(cls, board: MatchPublicState, has_ended: bool = False) -> list[str]:
        """
        Players expected to act right now.

        While betting that is the current player; while the dice are revealed
        it is every living player who has not rolled yet; nobody once the
        match is over.
        """
        if has_ended:
            return []
        if board.step is Step.BETTING:
            return [board.current_player]
        return [
            player_id for player_id in board.alive_players
            if not board.players[player_id].has_rolled
        ]
