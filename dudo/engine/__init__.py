"""
Dudo Game Engine.

Pure Python rules for Dudo (Perudo) with zero UI/transport dependencies.
Handles bid validation, turn order, challenge resolution, rolls and ranks.
"""

from dudo.engine.base import (
    Bet,
    BetTransition,
    ChallengeResult,
    MatchConfig,
    MatchPublicState,
    MatchState,
    PlayerPrivateInfo,
    PlayerPublicInfo,
    RollResult,
    Step,
)
from dudo.engine.bets import classify_bet_transition, is_new_bet_valid, minimum_raise
from dudo.engine.game import DudoEngine
from dudo.engine.random_source import DefaultRandomSource, RandomSource, ScriptedRandomSource
from dudo.engine.resolver import RoundResolver
from dudo.engine.rolls import RollSynchronizer
from dudo.engine.turns import TurnSequencer

__all__ = [
    # Data Classes
    "Bet",
    "ChallengeResult",
    "MatchConfig",
    "MatchPublicState",
    "MatchState",
    "PlayerPrivateInfo",
    "PlayerPublicInfo",
    "RollResult",
    # Enums
    "BetTransition",
    "Step",
    # Bet validation
    "classify_bet_transition",
    "is_new_bet_valid",
    "minimum_raise",
    # Randomness
    "DefaultRandomSource",
    "RandomSource",
    "ScriptedRandomSource",
    # Engines
    "DudoEngine",
    "RoundResolver",
    "RollSynchronizer",
    "TurnSequencer",
]
