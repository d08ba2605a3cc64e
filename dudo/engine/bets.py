"""
Dudo - Bet Validation

Decides whether a bid is a legal raise of the current bid.

Rules outside palifico rounds:
    - 1s are wild and count as any face
    - The opening bid of a round cannot be on 1s
    - Same kind of face: raise the quantity, or keep it and raise the face
    - Into wilds: at least half the current quantity, rounded up
    - Out of wilds: at least twice the current quantity plus one
    - Wilds to wilds: raise the quantity

Palifico rounds (1s are not wild):
    - The opening bid is free
    - A bidder with a single die raises the quantity (any face), or keeps it
      and raises the face
    - Anyone else must keep the face and raise the quantity
"""

import math

from dudo.engine.base import MAX_FACE, MIN_FACE, WILD_FACE, Bet, BetTransition


def classify_bet_transition(old_bet: Bet | None, new_bet: Bet) -> BetTransition:
    """Tag how `new_bet` moves relative to `old_bet` with respect to wilds."""
    if old_bet is None:
        return BetTransition.NO_PRIOR_BET
    if old_bet.is_wild and new_bet.is_wild:
        return BetTransition.WILD_TO_WILD
    if old_bet.is_wild:
        return BetTransition.WILD_TO_NON_WILD
    if new_bet.is_wild:
        return BetTransition.NON_WILD_TO_WILD
    return BetTransition.NON_WILD_TO_NON_WILD


def is_bet_in_range(bet: Bet) -> bool:
    """Whether the bid names a real face and at least one die."""
    return MIN_FACE <= bet.face <= MAX_FACE and bet.quantity >= 1


def is_new_bet_valid(
    old_bet: Bet | None,
    new_bet: Bet,
    palifico: bool,
    bidder_num_dice: int,
) -> bool:
    """
    Check whether `new_bet` is a legal bid on top of `old_bet`.

    Args:
        old_bet: Current bid, None for the opening bid of a round
        new_bet: Proposed bid
        palifico: Whether this is a palifico round
        bidder_num_dice: Dice the bidder has left (matters in palifico only)

    Returns:
        True if the bid is legal
    """
    if not is_bet_in_range(new_bet):
        return False

    if palifico:
        return _is_palifico_raise(old_bet, new_bet, bidder_num_dice)

    transition = classify_bet_transition(old_bet, new_bet)

    if transition is BetTransition.NO_PRIOR_BET:
        return not new_bet.is_wild
    elif transition is BetTransition.NON_WILD_TO_NON_WILD:
        return _raises_quantity_or_face(old_bet, new_bet)
    elif transition is BetTransition.WILD_TO_NON_WILD:
        return new_bet.quantity >= old_bet.quantity * 2 + 1
    elif transition is BetTransition.NON_WILD_TO_WILD:
        return new_bet.quantity >= math.ceil(old_bet.quantity / 2)
    elif transition is BetTransition.WILD_TO_WILD:
        return new_bet.quantity > old_bet.quantity

    raise ValueError(f"Unhandled bet transition {transition}")


def minimum_raise(
    old_bet: Bet | None,
    face: int,
    palifico: bool,
    bidder_num_dice: int,
) -> int | None:
    """
    Smallest legal quantity for a bid on `face`.

    Returns:
        The quantity, or None if no bid on that face is legal
    """
    if not (MIN_FACE <= face <= MAX_FACE):
        return None

    # No legal raise ever needs more than twice the current quantity plus one.
    upper = 1 if old_bet is None else old_bet.quantity * 2 + 1
    for quantity in range(1, upper + 2):
        if is_new_bet_valid(old_bet, Bet(quantity, face), palifico, bidder_num_dice):
            return quantity
    return None


def _raises_quantity_or_face(old_bet: Bet, new_bet: Bet) -> bool:
    return new_bet.quantity > old_bet.quantity or (
        new_bet.quantity == old_bet.quantity and new_bet.face > old_bet.face
    )


def _is_palifico_raise(old_bet: Bet | None, new_bet: Bet, bidder_num_dice: int) -> bool:
    if old_bet is None:
        return True

    if bidder_num_dice == 1:
        return _raises_quantity_or_face(old_bet, new_bet)

    return new_bet.quantity > old_bet.quantity and new_bet.face == old_bet.face
