"""
Dudo - Input Validation Utilities

Validation for match setup inputs. Moves are never validated here: illegal
moves are refused by the engine gates. All validators either return
normalized data or raise descriptive ValueError exceptions.
"""

from typing import Mapping, Sequence

from dudo.engine.base import (
    MAX_FACE,
    MAX_PLAYERS,
    MIN_FACE,
    MIN_PLAYERS,
    NUM_COLORS,
    START_NUM_DICE_OPTIONS,
)


def validate_dice_values(values: Sequence[int], count: int) -> list[int]:
    """
    Validate a roll of D6 dice.

    Args:
        values: Dice values to validate
        count: Exact number of dice expected

    Returns:
        Validated values as a new list

    Raises:
        ValueError: If the count or any value is wrong
    """
    values_list = list(values)
    if len(values_list) != count:
        raise ValueError(f"Expected {count} dice, got {len(values_list)}.")

    for i, value in enumerate(values_list):
        if not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (MIN_FACE <= value <= MAX_FACE):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between {MIN_FACE} and {MAX_FACE}."
            )

    return values_list


def validate_player_ids(player_ids: Sequence[str]) -> list[str]:
    """
    Validate the participants of a match.

    Args:
        player_ids: Opaque player identities

    Returns:
        Validated ids as a new list, in the given order

    Raises:
        ValueError: If the count is not 2-7 or ids are empty or duplicated
    """
    ids = list(player_ids)

    if not (MIN_PLAYERS <= len(ids) <= MAX_PLAYERS):
        raise ValueError(f"Player count must be {MIN_PLAYERS}-{MAX_PLAYERS}, got {len(ids)}.")

    for player_id in ids:
        if not isinstance(player_id, str) or not player_id:
            raise ValueError(f"Player id must be a non-empty string, got {player_id!r}.")

    if len(set(ids)) != len(ids):
        raise ValueError("Player ids must be unique.")

    return ids


def validate_start_num_dice(num_dice: int) -> int:
    """
    Validate the starting dice count.

    Raises:
        ValueError: If the count is not one of the allowed options
    """
    if not isinstance(num_dice, int):
        raise ValueError(f"Starting dice count must be an integer, got {type(num_dice).__name__}.")

    if num_dice not in START_NUM_DICE_OPTIONS:
        raise ValueError(
            f"Starting dice count must be one of {START_NUM_DICE_OPTIONS}, got {num_dice}."
        )

    return num_dice


def validate_colors(
    colors: Mapping[str, int] | None,
    player_ids: Sequence[str],
) -> dict[str, int]:
    """
    Validate per-player color slots.

    Colors are exclusive: two players cannot share a slot. Players without
    an explicit color get the first free slot, in the given player order.

    Args:
        colors: Requested color index per player id (may be partial or None)
        player_ids: All participants

    Returns:
        Color index for every player

    Raises:
        ValueError: If a color is out of range, shared, or set for an unknown player
    """
    requested = dict(colors or {})

    for player_id, color in requested.items():
        if player_id not in player_ids:
            raise ValueError(f"Color set for unknown player {player_id!r}.")
        if not isinstance(color, int) or not (0 <= color < NUM_COLORS):
            raise ValueError(f"Color must be between 0 and {NUM_COLORS - 1}, got {color!r}.")

    if len(set(requested.values())) != len(requested):
        raise ValueError("Two players cannot share the same color.")

    free = [c for c in range(NUM_COLORS) if c not in requested.values()]
    result: dict[str, int] = {}
    for player_id in player_ids:
        if player_id in requested:
            result[player_id] = requested[player_id]
        else:
            result[player_id] = free.pop(0)

    return result
