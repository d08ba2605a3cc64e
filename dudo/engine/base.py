"""
Dudo - Engine Base Classes

This module defines the data structures and enums shared by every engine
component. Bets are immutable; the match aggregate and its per-player records
are plain mutable dataclasses, created once at match start and mutated in
place by the engine components for the lifetime of the match.
"""

from dataclasses import dataclass, field
from enum import Enum


WILD_FACE = 1
MIN_FACE = 1
MAX_FACE = 6

MIN_PLAYERS = 2
MAX_PLAYERS = 7
START_NUM_DICE_OPTIONS = (3, 4, 5, 6)
DEFAULT_START_NUM_DICE = 5
NUM_COLORS = 7


class Step(str, Enum):
    """Phase of the current round."""
    BETTING = "betting"
    REVEALED = "revealed"


class BetTransition(Enum):
    """How a new bid relates to the current one, with respect to wilds."""
    NO_PRIOR_BET = "no_prior_bet"
    WILD_TO_WILD = "wild_to_wild"
    WILD_TO_NON_WILD = "wild_to_non_wild"
    NON_WILD_TO_WILD = "non_wild_to_wild"
    NON_WILD_TO_NON_WILD = "non_wild_to_non_wild"


@dataclass(frozen=True)
class Bet:
    """
    A bid: "there are at least `quantity` dice showing `face`".

    No range checks happen here; the bet validator rejects out-of-range bids
    instead of raising.
    """
    quantity: int
    face: int

    @property
    def is_wild(self) -> bool:
        return self.face == WILD_FACE

    def __str__(self) -> str:
        return f"{self.quantity} x {self.face}"


@dataclass
class PlayerPublicInfo:
    """
    What everyone at the table knows about a player.

    Attributes:
        is_alive: False once eliminated, never reset
        has_rolled: True once the player rolled for the upcoming round
        dice_values: The player's dice, only while they are revealed
        color_index: Cosmetic color slot (0-6)
    """
    is_alive: bool = True
    has_rolled: bool = True
    dice_values: list[int] | None = None
    color_index: int = 0


@dataclass
class PlayerPrivateInfo:
    """
    What only the owning player knows until the dice are revealed.

    Attributes:
        dice_values: Current dice, one value per remaining die
        num_dice_remaining: Dice left; the player is out at 0
        is_rolling: True between a roll request and its completion
    """
    num_dice_remaining: int
    dice_values: list[int] = field(default_factory=list)
    is_rolling: bool = False


@dataclass
class MatchPublicState:
    """
    The shared board.

    Attributes:
        start_num_dice: Dice per player at match start
        player_order: Seating order, fixed for the whole match
        players: Public info keyed by player id
        current_player_index: Seat of the player expected to act
        previous_player_index: Seat of the last bidder
        step: Betting or Revealed
        palifico: Whether the current round is a palifico round
        bet: Current bid, if any
        loser: Player who lost the last challenge (Revealed step)
        winner: Last player standing, once the match is over
        actual_count: Matching dice counted at the last challenge
        death_list: Eliminated players, in elimination order
    """
    start_num_dice: int
    player_order: list[str]
    players: dict[str, PlayerPublicInfo]
    current_player_index: int = 0
    previous_player_index: int | None = None
    step: Step = Step.BETTING
    palifico: bool = False
    bet: Bet | None = None
    loser: str | None = None
    winner: str | None = None
    actual_count: int | None = None
    death_list: list[str] = field(default_factory=list)

    @property
    def current_player(self) -> str:
        return self.player_order[self.current_player_index]

    @property
    def previous_player(self) -> str | None:
        if self.previous_player_index is None:
            return None
        return self.player_order[self.previous_player_index]

    @property
    def alive_players(self) -> list[str]:
        """Living players, in seating order."""
        return [p for p in self.player_order if self.players[p].is_alive]


@dataclass
class MatchState:
    """
    The match aggregate: public board plus every player's private info.

    Attributes:
        public: Shared state, visible to everyone
        private: Private info keyed by player id
        ranks: Final rank per player (0 = winner), set when the match ends
    """
    public: MatchPublicState
    private: dict[str, PlayerPrivateInfo]
    ranks: dict[str, int] | None = None

    @property
    def has_ended(self) -> bool:
        return self.ranks is not None

    @property
    def total_dice(self) -> int:
        return sum(info.num_dice_remaining for info in self.private.values())


@dataclass(frozen=True)
class MatchConfig:
    """
    Configuration for a match.

    Attributes:
        start_num_dice: Dice per player at match start (3-6)
        num_players: Number of participants (2-7)
    """
    start_num_dice: int = DEFAULT_START_NUM_DICE
    num_players: int = MIN_PLAYERS

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.start_num_dice not in START_NUM_DICE_OPTIONS:
            raise ValueError(
                f"Starting dice count must be one of {START_NUM_DICE_OPTIONS}, "
                f"got {self.start_num_dice}."
            )
        if not MIN_PLAYERS <= self.num_players <= MAX_PLAYERS:
            raise ValueError(
                f"Number of players must be between {MIN_PLAYERS} and {MAX_PLAYERS}."
            )


@dataclass(frozen=True)
class ChallengeResult:
    """
    Outcome of a resolved challenge.

    Attributes:
        bet: The bid that was challenged
        challenger: Player who called
        bidder: Player who made the bid
        actual_count: Dice matching the bid (wilds included outside palifico)
        loser: Player losing a die
        eliminated: Whether the loser just lost their last die
        winner: Last player standing, if the challenge ended the match
        ranks: Final ranks, if the challenge ended the match
    """
    bet: Bet
    challenger: str
    bidder: str
    actual_count: int
    loser: str
    eliminated: bool
    winner: str | None = None
    ranks: dict[str, int] | None = None


@dataclass(frozen=True)
class RollResult:
    """
    Outcome of a completed roll.

    Attributes:
        player_id: Player who rolled
        dice_values: Faces drawn
        round_started: Whether this roll was the last one missing
        palifico: Palifico flag of the new round (only if round_started)
    """
    player_id: str
    dice_values: tuple[int, ...]
    round_started: bool = False
    palifico: bool = False
