"""Move verification and scoring for wordgrid."""

from .verify import verify_move, extract_words, validate_line, validate_anchor
from .models import (
    BLANK,
    Cell,
    Coord,
    FormedWord,
    Multiplier,
    TilePlacement,
    ValidationError,
    ValidationResult,
)
from .board import Board, BoardError, OutOfBounds, CellOccupied, BOARD_WIDTH, BOARD_HEIGHT
from .dictionary import Dictionary, WordListError
from .scoring import TILE_VALUES, score_move, score_word, tile_score
from .parsing import parse_move

__all__ = [
    # Main verification
    "verify_move",
    "extract_words",
    "validate_line",
    "validate_anchor",
    # Models
    "BLANK",
    "Cell",
    "Coord",
    "FormedWord",
    "Multiplier",
    "TilePlacement",
    "ValidationError",
    "ValidationResult",
    # Board
    "Board",
    "BoardError",
    "OutOfBounds",
    "CellOccupied",
    "BOARD_WIDTH",
    "BOARD_HEIGHT",
    # Dictionary
    "Dictionary",
    "WordListError",
    # Scoring
    "TILE_VALUES",
    "score_move",
    "score_word",
    "tile_score",
    # Parsing
    "parse_move",
]
