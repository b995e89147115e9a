"""
Pydantic models for the environment layer.

Configuration and turn records used by the game session. The Game and
Player classes live in their own modules.
"""

from typing import List, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..verifiers.board import BOARD_WIDTH, BOARD_HEIGHT
from ..verifiers.models import Coord, Multiplier, TilePlacement, ValidationResult
from ..verifiers.scoring import TILE_VALUES


# Starting hand size
HAND_LIMIT = 7

# Top-left quadrant of the reference 11x11 layout, mirrored into the other three
_QUADRANT: Dict[Coord, Multiplier] = {
    Coord(0, 0): Multiplier.TRIPLE_LETTER,
    Coord(0, 2): Multiplier.TRIPLE_WORD,
    Coord(1, 1): Multiplier.DOUBLE_WORD,
    Coord(1, 5): Multiplier.DOUBLE_WORD,
    Coord(2, 0): Multiplier.TRIPLE_WORD,
    Coord(2, 2): Multiplier.DOUBLE_LETTER,
    Coord(2, 4): Multiplier.DOUBLE_LETTER,
    Coord(3, 3): Multiplier.TRIPLE_LETTER,
    Coord(4, 2): Multiplier.DOUBLE_LETTER,
    Coord(4, 4): Multiplier.DOUBLE_LETTER,
    Coord(5, 1): Multiplier.DOUBLE_WORD,
}


def default_bonus_layout(width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> Dict[Coord, Multiplier]:
    """Symmetric bonus layout, clipped to the board."""
    layout: Dict[Coord, Multiplier] = {}
    for (r, c), multiplier in _QUADRANT.items():
        for row in (r, height - 1 - r):
            for col in (c, width - 1 - c):
                if 0 <= row < height and 0 <= col < width:
                    layout[Coord(row, col)] = multiplier
    return layout


class BonusSquare(BaseModel):
    """A configured bonus square."""
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    multiplier: Multiplier


class GameConfig(BaseModel):
    """Configuration for a game session."""
    model_config = ConfigDict(extra='forbid')

    width: int = Field(default=BOARD_WIDTH, ge=1)
    height: int = Field(default=BOARD_HEIGHT, ge=1)
    hand_capacity: int = Field(default=HAND_LIMIT, ge=1)
    word_list: Optional[str] = None
    tile_values: Dict[str, int] = Field(default_factory=lambda: dict(TILE_VALUES))
    bonus_squares: Optional[List[BonusSquare]] = None  # None = default layout
    full_hand_bonus: int = Field(default=50, ge=0)

    @model_validator(mode='after')
    def _check_bonus_bounds(self) -> "GameConfig":
        for square in self.bonus_squares or []:
            if square.row >= self.height or square.col >= self.width:
                raise ValueError(
                    f"Bonus square ({square.row},{square.col}) is outside the "
                    f"{self.width}x{self.height} board"
                )
        return self

    @property
    def bonus_layout(self) -> Dict[Coord, Multiplier]:
        """Bonus squares keyed by coordinate."""
        if self.bonus_squares is None:
            return default_bonus_layout(self.width, self.height)
        return {Coord(s.row, s.col): s.multiplier for s in self.bonus_squares}


class TurnResult(BaseModel):
    """Result of a single submitted move."""
    player_id: str
    turn_number: int
    placements: List[TilePlacement] = Field(default_factory=list)
    validation: Optional[ValidationResult] = None
    tiles_before: List[str] = Field(default_factory=list)
    tiles_after: List[str] = Field(default_factory=list)
    score: int = 0
    committed: bool = False
