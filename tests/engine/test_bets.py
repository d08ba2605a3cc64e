"""
Dudo - Bet Validation Tests

Exhaustive tables for regular and palifico raises, including the exact
boundaries of the conversions into and out of wilds.
"""

import math

import pytest

from dudo.engine.base import Bet, BetTransition
from dudo.engine.bets import (
    classify_bet_transition,
    is_bet_in_range,
    is_new_bet_valid,
    minimum_raise,
)


def _bet(pair: tuple[int, int] | None) -> Bet | None:
    return Bet(*pair) if pair is not None else None


# === Regular rounds ===


class TestRegularRaises:
    """Tests for is_new_bet_valid() outside palifico."""

    @pytest.mark.parametrize(
        ("old", "new", "expected"),
        [
            ((2, 2), (2, 3), True),
            ((2, 2), (2, 2), False),
            ((3, 3), (4, 2), True),
            ((3, 3), (4, 3), True),
            ((3, 3), (3, 2), False),
            ((3, 3), (2, 4), False),
            # Into wilds: half the quantity, rounded up
            ((3, 3), (2, 1), True),
            ((3, 3), (1, 1), False),
            ((4, 3), (2, 1), True),
            ((4, 3), (1, 1), False),
            ((5, 3), (3, 1), True),
            ((5, 3), (2, 1), False),
            # Out of wilds: twice the quantity plus one
            ((1, 1), (3, 3), True),
            ((1, 1), (2, 3), False),
            ((2, 1), (5, 3), True),
            ((2, 1), (4, 3), False),
            # Wilds to wilds
            ((2, 1), (3, 1), True),
            ((3, 1), (10, 1), True),
            ((2, 1), (2, 1), False),
            # Opening bids
            (None, (2, 1), False),
            (None, (2, 2), True),
            # Out of range
            (None, (0, 3), False),
            (None, (0, 0), False),
            (None, (1, 7), False),
        ],
    )
    def test_table(self, old, new, expected):
        assert is_new_bet_valid(_bet(old), _bet(new), palifico=False, bidder_num_dice=4) is expected

    @pytest.mark.parametrize("old_qty", range(1, 13))
    def test_into_wilds_exact_boundary(self, old_qty):
        threshold = math.ceil(old_qty / 2)
        old = Bet(old_qty, 4)
        assert is_new_bet_valid(old, Bet(threshold, 1), False, 5) is True
        if threshold > 1:
            assert is_new_bet_valid(old, Bet(threshold - 1, 1), False, 5) is False

    @pytest.mark.parametrize("old_qty", range(1, 13))
    def test_out_of_wilds_exact_boundary(self, old_qty):
        threshold = old_qty * 2 + 1
        old = Bet(old_qty, 1)
        for face in range(2, 7):
            assert is_new_bet_valid(old, Bet(threshold, face), False, 5) is True
            assert is_new_bet_valid(old, Bet(threshold - 1, face), False, 5) is False

    @pytest.mark.parametrize("face", range(2, 7))
    def test_any_non_wild_opening_bid(self, face):
        assert is_new_bet_valid(None, Bet(1, face), False, 5) is True

    def test_die_count_ignored_outside_palifico(self):
        for num_dice in (1, 2, 6):
            assert is_new_bet_valid(Bet(3, 3), Bet(3, 4), False, num_dice) is True
            assert is_new_bet_valid(Bet(3, 3), Bet(3, 2), False, num_dice) is False

    def test_negative_quantity_rejected(self):
        assert is_new_bet_valid(Bet(2, 3), Bet(-4, 3), False, 5) is False


# === Palifico rounds ===


class TestPalificoRaises:
    """Tests for is_new_bet_valid() in palifico rounds."""

    @pytest.mark.parametrize(
        ("old", "new", "num_dice", "expected"),
        [
            # More than one die: same face, more dice
            ((2, 2), (2, 3), 2, False),
            ((2, 2), (3, 2), 2, True),
            ((2, 2), (2, 2), 2, False),
            ((2, 2), (3, 1), 2, False),
            ((2, 2), (10, 1), 2, False),
            ((2, 2), (10, 4), 2, False),
            ((3, 1), (4, 1), 2, True),
            ((3, 1), (4, 2), 2, False),
            # One die left: any raise
            ((2, 2), (2, 3), 1, True),
            ((2, 2), (3, 2), 1, True),
            ((2, 2), (2, 2), 1, False),
            ((2, 2), (3, 1), 1, True),
            ((2, 2), (2, 1), 1, False),
            ((2, 2), (10, 1), 1, True),
            ((2, 2), (10, 4), 1, True),
            ((3, 1), (4, 1), 1, True),
            ((3, 1), (4, 2), 1, True),
            # Opening bid, wilds included
            (None, (1, 1), 1, True),
            (None, (1, 1), 2, True),
            (None, (3, 5), 1, True),
            (None, (3, 5), 2, True),
        ],
    )
    def test_table(self, old, new, num_dice, expected):
        assert is_new_bet_valid(_bet(old), _bet(new), palifico=True, bidder_num_dice=num_dice) is expected

    @pytest.mark.parametrize("num_dice", [2, 3, 4, 5, 6])
    def test_many_dice_must_keep_face_and_raise(self, num_dice):
        old = Bet(3, 4)
        for quantity in range(1, 8):
            for face in range(1, 7):
                expected = face == 4 and quantity > 3
                assert is_new_bet_valid(old, Bet(quantity, face), True, num_dice) is expected

    def test_out_of_range_rejected_even_when_opening(self):
        assert is_new_bet_valid(None, Bet(0, 3), True, 1) is False
        assert is_new_bet_valid(None, Bet(2, 7), True, 2) is False


# === Transition tags ===


class TestClassifyBetTransition:
    """Tests for classify_bet_transition()."""

    @pytest.mark.parametrize(
        ("old", "new", "expected"),
        [
            (None, (2, 3), BetTransition.NO_PRIOR_BET),
            (None, (2, 1), BetTransition.NO_PRIOR_BET),
            ((2, 1), (3, 1), BetTransition.WILD_TO_WILD),
            ((2, 1), (5, 3), BetTransition.WILD_TO_NON_WILD),
            ((4, 3), (2, 1), BetTransition.NON_WILD_TO_WILD),
            ((4, 3), (4, 5), BetTransition.NON_WILD_TO_NON_WILD),
        ],
    )
    def test_tags(self, old, new, expected):
        assert classify_bet_transition(_bet(old), _bet(new)) is expected


class TestIsBetInRange:
    def test_valid(self):
        assert is_bet_in_range(Bet(1, 1)) is True
        assert is_bet_in_range(Bet(30, 6)) is True

    @pytest.mark.parametrize("pair", [(0, 2), (1, 0), (1, 7), (-1, 3)])
    def test_invalid(self, pair):
        assert is_bet_in_range(Bet(*pair)) is False


# === Minimum raise ===


class TestMinimumRaise:
    """Tests for minimum_raise()."""

    def test_opening_bid(self):
        assert minimum_raise(None, 3, palifico=False, bidder_num_dice=5) == 1

    def test_no_opening_on_wilds(self):
        assert minimum_raise(None, 1, palifico=False, bidder_num_dice=5) is None

    def test_opening_on_wilds_in_palifico(self):
        assert minimum_raise(None, 1, palifico=True, bidder_num_dice=3) == 1

    def test_higher_face_same_quantity(self):
        assert minimum_raise(Bet(3, 3), 4, False, 5) == 3

    def test_lower_face_needs_more(self):
        assert minimum_raise(Bet(3, 3), 2, False, 5) == 4

    def test_into_wilds(self):
        assert minimum_raise(Bet(5, 3), 1, False, 5) == 3

    def test_out_of_wilds(self):
        assert minimum_raise(Bet(2, 1), 6, False, 5) == 5

    def test_palifico_other_face_impossible(self):
        assert minimum_raise(Bet(3, 4), 5, True, 2) is None

    def test_palifico_single_die(self):
        assert minimum_raise(Bet(3, 4), 5, True, 1) == 3
        assert minimum_raise(Bet(3, 4), 2, True, 1) == 4

    def test_invalid_face(self):
        assert minimum_raise(Bet(3, 4), 7, False, 5) is None
