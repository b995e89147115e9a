"""Game session environment for wordgrid."""

from .models import (
    HAND_LIMIT,
    BonusSquare,
    GameConfig,
    TurnResult,
    default_bonus_layout,
)
from .game import Game
from .player import Player

__all__ = [
    "HAND_LIMIT",
    "BonusSquare",
    "GameConfig",
    "TurnResult",
    "default_bonus_layout",
    "Game",
    "Player",
]
