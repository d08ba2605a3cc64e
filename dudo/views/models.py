"""
Dudo - View Models

Pydantic models of the state published to the rendering layer. The public
view is the same for everyone; the player view adds the private dice of the
requesting player only.
"""

from pydantic import BaseModel, Field

from dudo.engine.base import Step


class BetView(BaseModel):
    """A bid on the board."""

    quantity: int = Field(ge=1)
    face: int = Field(ge=1, le=6)

    model_config = {"from_attributes": True}


class PlayerPublicView(BaseModel):
    """Public info of one player."""

    is_alive: bool
    has_rolled: bool
    dice_values: list[int] | None = None
    color_index: int = Field(ge=0, le=6)

    model_config = {"from_attributes": True}


class PlayerPrivateView(BaseModel):
    """Private info of the requesting player."""

    dice_values: list[int] = Field(default_factory=list)
    num_dice_remaining: int = Field(ge=0)
    is_rolling: bool = False

    model_config = {"from_attributes": True}


class PublicStateView(BaseModel):
    """The shared board, as every player sees it."""

    start_num_dice: int
    player_order: list[str]
    players: dict[str, PlayerPublicView]
    current_player_index: int
    previous_player_index: int | None = None
    step: Step
    palifico: bool
    bet: BetView | None = None
    loser: str | None = None
    winner: str | None = None
    actual_count: int | None = None
    death_list: list[str] = Field(default_factory=list)
    active_players: list[str] = Field(default_factory=list)
    has_ended: bool = False
    ranks: dict[str, int] | None = None

    model_config = {"from_attributes": True}


class PlayerStateView(BaseModel):
    """What one player is allowed to see."""

    player_id: str
    public: PublicStateView
    private: PlayerPrivateView
    its_your_turn: bool = False
