"""
Dudo - Rules engine for the dice-bluffing game Dudo (Perudo).
"""

from dudo.match import DudoMatch

__all__ = ["DudoMatch"]
