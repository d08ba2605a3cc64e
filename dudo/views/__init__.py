"""
Dudo Views.

Read-only snapshots of a match for the rendering layer.
"""

from dudo.views.models import (
    BetView,
    PlayerPrivateView,
    PlayerPublicView,
    PlayerStateView,
    PublicStateView,
)
from dudo.views.snapshot import build_player_view, build_public_view

__all__ = [
    "BetView",
    "PlayerPrivateView",
    "PlayerPublicView",
    "PlayerStateView",
    "PublicStateView",
    "build_player_view",
    "build_public_view",
]
