"""
Dudo - Turn Sequencer Tests
"""

import pytest

from dudo.engine.base import Step
from dudo.engine.turns import TurnSequencer


class TestNextAliveIndex:
    """Tests for TurnSequencer.next_alive_index()."""

    def test_everyone_alive(self, three_seat_board):
        board = three_seat_board()
        assert TurnSequencer.next_alive_index(board, 0) == 1
        assert TurnSequencer.next_alive_index(board, 1) == 2

    def test_wraps_around(self, three_seat_board):
        board = three_seat_board()
        assert TurnSequencer.next_alive_index(board, 2) == 0

    def test_skips_dead_seat(self, three_seat_board):
        board = three_seat_board(dead=["b"])
        assert TurnSequencer.next_alive_index(board, 0) == 2

    def test_skips_dead_seat_across_wrap(self, three_seat_board):
        board = three_seat_board(dead=["a"])
        assert TurnSequencer.next_alive_index(board, 2) == 1

    def test_returns_to_self_when_alone(self, three_seat_board):
        board = three_seat_board(dead=["a", "c"])
        assert TurnSequencer.next_alive_index(board, 1) == 1

    def test_nobody_alive_raises(self, three_seat_board):
        board = three_seat_board(dead=["a", "b", "c"])
        with pytest.raises(ValueError, match="No living player"):
            TurnSequencer.next_alive_index(board, 0)


class TestAdvanceTurn:
    """Tests for TurnSequencer.advance_turn()."""

    def test_sets_previous_and_current(self, three_seat_board):
        board = three_seat_board(current=1)
        assert TurnSequencer.advance_turn(board) == 2
        assert board.previous_player_index == 1
        assert board.current_player_index == 2

    @pytest.mark.parametrize("dead", ["a", "b", "c"])
    @pytest.mark.parametrize("current", [0, 1, 2])
    def test_always_lands_on_living_player(self, three_seat_board, dead, current):
        board = three_seat_board(dead=[dead], current=current)
        TurnSequencer.advance_turn(board)
        assert board.players[board.current_player].is_alive
        assert board.previous_player_index == current

    def test_full_cycle_visits_living_seats_in_order(self, three_seat_board):
        board = three_seat_board(dead=["b"])
        visited = []
        for _ in range(4):
            TurnSequencer.advance_turn(board)
            visited.append(board.current_player)
        assert visited == ["c", "a", "c", "a"]


class TestActivePlayers:
    """Tests for TurnSequencer.active_players()."""

    def test_betting_only_current(self, three_seat_board):
        board = three_seat_board(current=2)
        assert TurnSequencer.active_players(board) == ["c"]

    def test_revealed_everyone_who_has_not_rolled(self, three_seat_board):
        board = three_seat_board(dead=["a"])
        board.step = Step.REVEALED
        for info in board.players.values():
            info.has_rolled = False
        board.players["c"].has_rolled = True
        assert TurnSequencer.active_players(board) == ["b"]

    def test_nobody_after_the_end(self, three_seat_board):
        board = three_seat_board()
        assert TurnSequencer.active_players(board, has_ended=True) == []

    def test_is_current_player(self, three_seat_board):
        board = three_seat_board(current=1)
        assert TurnSequencer.is_current_player(board, "b")
        assert not TurnSequencer.is_current_player(board, "a")
