"""
Dudo - Test Configuration and Fixtures

Common fixtures and helpers for all test modules.
"""

from typing import Callable, Sequence

import pytest

from dudo.engine.base import MatchPublicState, PlayerPublicInfo
from dudo.engine.random_source import ScriptedRandomSource
from dudo.match import DudoMatch


def player_ids(count: int) -> list[str]:
    return [f"player-{i}" for i in range(count)]


@pytest.fixture
def scripted_random() -> ScriptedRandomSource:
    """Random source whose shuffle keeps the given order unless scripted."""
    return ScriptedRandomSource(seed=42)


@pytest.fixture
def make_match(scripted_random) -> Callable[..., DudoMatch]:
    """
    Factory for matches seated as player-0, player-1, ...

    `hands` scripts the opening dice of each seat, in seating order.
    """
    def _make(
        num_players: int = 2,
        start_num_dice: int = 5,
        hands: Sequence[Sequence[int]] | None = None,
        order: Sequence[str] | None = None,
        **kwargs,
    ) -> DudoMatch:
        ids = player_ids(num_players)
        if order is not None or hands:
            scripted_random.next(order if order is not None else ids)
        for hand in hands or ():
            scripted_random.next(hand)
        return DudoMatch.create(
            ids,
            random_source=scripted_random,
            start_num_dice=start_num_dice,
            **kwargs,
        )

    return _make


@pytest.fixture
def three_seat_board() -> Callable[..., MatchPublicState]:
    """Factory for a bare 3-seat board with some seats eliminated."""
    def _make(dead: Sequence[str] = (), current: int = 0) -> MatchPublicState:
        order = ["a", "b", "c"]
        players = {p: PlayerPublicInfo(is_alive=p not in dead) for p in order}
        return MatchPublicState(
            start_num_dice=5,
            player_order=order,
            players=players,
            current_player_index=current,
        )

    return _make


@pytest.fixture
def lose_round() -> Callable[[DudoMatch, str, str], None]:
    """`bidder` overbids, `caller` calls, then every living player rolls."""
    def _play(match: DudoMatch, bidder: str, caller: str) -> None:
        assert match.bet(bidder, 99, 2)
        assert match.challenge(caller)
        for player_id in match.active_players:
            assert match.roll(player_id)

    return _play
