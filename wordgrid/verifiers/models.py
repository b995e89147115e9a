"""Data models for move verification."""

from enum import Enum
from typing import List, Optional, Literal, NamedTuple
from pydantic import BaseModel, Field


ErrorCode = Literal[
    "EMPTY_PLACEMENT",
    "DUPLICATE_COORDINATE",
    "OUT_OF_BOUNDS",
    "CELL_OCCUPIED",
    "LETTER_NOT_IN_HAND",
    "NOT_IN_LINE",
    "MUST_COVER_CENTER",
    "DISCONNECTED",
    "NO_WORD_FORMED",
    "INVALID_WORD",
    "PARSE_ERROR",
]

# Hand tile standing in for any letter
BLANK = "?"


class Coord(NamedTuple):
    """A board position, row first."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


class Multiplier(str, Enum):
    """Bonus square types."""
    DOUBLE_LETTER = "DL"
    TRIPLE_LETTER = "TL"
    DOUBLE_WORD = "DW"
    TRIPLE_WORD = "TW"

    @property
    def factor(self) -> int:
        return 3 if self.value[0] == "T" else 2

    @property
    def is_word(self) -> bool:
        return self.value[1] == "W"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Multiplier.DOUBLE_LETTER: ".",
    Multiplier.TRIPLE_LETTER: ":",
    Multiplier.DOUBLE_WORD: "*",
    Multiplier.TRIPLE_WORD: "#",
}


class Cell(BaseModel):
    """
    One grid position.

    Occupancy and bonus are independent: a bonus square keeps its
    multiplier after a tile lands on it.
    """
    letter: Optional[str] = None
    multiplier: Optional[Multiplier] = None

    @property
    def is_empty(self) -> bool:
        return self.letter is None

    @property
    def is_placed(self) -> bool:
        return self.letter is not None


class TilePlacement(BaseModel):
    """A single proposed tile. Lowercase letters are blanks played as that letter."""
    coord: Coord
    letter: str = Field(..., pattern=r'^[A-Za-z]$')

    @property
    def is_blank(self) -> bool:
        return self.letter.islower()

    @property
    def hand_tile(self) -> str:
        """The hand tile this placement consumes."""
        return BLANK if self.is_blank else self.letter


class FormedWord(BaseModel):
    """A maximal run of two or more tiles produced by a move."""
    coords: List[Coord]
    text: str

    def __len__(self) -> int:
        return len(self.coords)


class ValidationError(BaseModel):
    """A single validation error."""
    code: ErrorCode
    message: str
    word: Optional[str] = None
    coord: Optional[Coord] = None


class ValidationResult(BaseModel):
    """Result of validating (and scoring) a candidate move."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    placements: List[TilePlacement] = Field(default_factory=list)
    words: List[FormedWord] = Field(default_factory=list)
    hand_after: List[str] = Field(default_factory=list)
    word_scores: List[int] = Field(default_factory=list)
    score: int = 0
    grid: Optional[str] = None  # Board render with the move applied

    @property
    def error(self) -> Optional[ValidationError]:
        """The rejection reason, if any."""
        return self.errors[0] if self.errors else None

    @property
    def word_texts(self) -> List[str]:
        return [w.text for w in self.words]
