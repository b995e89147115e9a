"""
Move verification for validating candidate tile placements.

Checks, in order, stopping at the first failure:
1. Placement shape (non-empty, no repeated coordinates)
2. Every coordinate is on the board and currently empty
3. Every letter is available in the hand
4. The tiles lie in a single gap-free row or column
5. The first move covers the center; later moves touch existing tiles
6. The resulting board is a single connected group
7. At least one word is formed, and every formed word is in the dictionary

The board passed in is never mutated.
"""

import logging
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .board import Board
from .dictionary import Dictionary
from .models import BLANK, Coord, FormedWord, TilePlacement, ValidationError, ValidationResult

log = logging.getLogger(__name__)

HORIZONTAL = (0, 1)
VERTICAL = (1, 0)


def validate_shape(placements: Sequence[TilePlacement]) -> Optional[ValidationError]:
    """Reject empty placements and repeated coordinates."""
    if not placements:
        return ValidationError(code="EMPTY_PLACEMENT", message="No tiles were placed")

    seen = set()
    for p in placements:
        if p.coord in seen:
            return ValidationError(
                code="DUPLICATE_COORDINATE",
                message=f"Two tiles placed at {p.coord}",
                coord=p.coord,
            )
        seen.add(p.coord)
    return None


def validate_targets(board: Board, placements: Sequence[TilePlacement]) -> Optional[ValidationError]:
    """Every target cell must be on the board and empty."""
    for p in placements:
        if not board.in_bounds(p.coord):
            return ValidationError(
                code="OUT_OF_BOUNDS",
                message=f"{p.coord} is outside the {board.width}x{board.height} board",
                coord=p.coord,
            )
        existing = board.letter_at(p.coord)
        if existing is not None:
            return ValidationError(
                code="CELL_OCCUPIED",
                message=f"{p.coord} already holds '{existing}'",
                coord=p.coord,
            )
    return None


def normalize_hand(hand: Sequence[str]) -> List[str]:
    """Hand tiles in uppercase; blanks stay '?'."""
    return [t.upper() for t in hand]


def consume_tiles(
    hand: Sequence[str], placements: Sequence[TilePlacement]
) -> Tuple[List[str], Optional[ValidationError]]:
    """
    Remove the placed tiles from a copy of the hand.

    Returns:
        Tuple of (remaining hand, error). On error the hand is returned unchanged.
    """
    hand = normalize_hand(hand)
    available = Counter(hand)
    for p in placements:
        tile = p.hand_tile
        if available[tile] <= 0:
            needed = sum(1 for q in placements if q.hand_tile == tile)
            label = "blank" if tile == BLANK else f"'{tile}'"
            return list(hand), ValidationError(
                code="LETTER_NOT_IN_HAND",
                message=f"Move needs {needed} {label} tile(s), hand has {Counter(hand)[tile]}",
                coord=p.coord,
            )
        available[tile] -= 1

    remaining = list(hand)
    for p in placements:
        remaining.remove(p.hand_tile)
    return remaining, None


def main_direction(placements: Sequence[TilePlacement]) -> Optional[Tuple[int, int]]:
    """Direction of the line the tiles share, or None if they are scattered."""
    rows = {p.coord.row for p in placements}
    cols = {p.coord.col for p in placements}
    if len(rows) == 1:
        return HORIZONTAL
    if len(cols) == 1:
        return VERTICAL
    return None


def validate_line(board: Board, placements: Sequence[TilePlacement]) -> Optional[ValidationError]:
    """Tiles must share a row or column, with any gaps filled by existing tiles."""
    direction = main_direction(placements)
    if direction is None:
        return ValidationError(
            code="NOT_IN_LINE",
            message="Tiles must all be in one row or one column",
        )

    new = {p.coord for p in placements}
    ordered = sorted(new)
    first, last = ordered[0], ordered[-1]
    dr, dc = direction
    coord = first
    while coord != last:
        coord = Coord(coord.row + dr, coord.col + dc)
        if coord not in new and not board.is_occupied(coord):
            return ValidationError(
                code="NOT_IN_LINE",
                message=f"Gap at {coord} between {first} and {last}",
                coord=coord,
            )
    return None


def validate_anchor(board: Board, placements: Sequence[TilePlacement]) -> Optional[ValidationError]:
    """First move must cover the center; later moves must touch an existing tile."""
    if board.is_board_empty():
        if all(p.coord != board.center for p in placements):
            return ValidationError(
                code="MUST_COVER_CENTER",
                message=f"First move must cover the center square {board.center}",
                coord=board.center,
            )
        return None

    if not any(board.adjacent_to_existing_tile(p.coord) for p in placements):
        return ValidationError(
            code="DISCONNECTED",
            message="Move does not touch any tile already on the board",
        )
    return None


def apply_placements(board: Board, placements: Sequence[TilePlacement]) -> Board:
    """Copy of the board with the tiles placed."""
    result = board.copy()
    for p in placements:
        result.place(p.coord, p.letter)
    return result


def word_through(board: Board, coord: Coord, direction: Tuple[int, int]) -> FormedWord:
    """Maximal run of tiles through coord along direction."""
    dr, dc = direction
    start = coord
    while board.is_occupied((start.row - dr, start.col - dc)):
        start = Coord(start.row - dr, start.col - dc)

    coords: List[Coord] = []
    current = start
    while board.is_occupied(current):
        coords.append(current)
        current = Coord(current.row + dr, current.col + dc)

    return FormedWord(coords=coords, text="".join(board.letter_at(c) for c in coords))


def extract_words(board: Board, placements: Sequence[TilePlacement]) -> List[FormedWord]:
    """
    Every word of two or more tiles running through a placed tile.

    ``board`` must already hold the placements. The word along the
    placement's own line comes first, then cross-words in placement order.
    """
    main = main_direction(placements) or HORIZONTAL
    cross = VERTICAL if main == HORIZONTAL else HORIZONTAL

    candidates = [word_through(board, placements[0].coord, main)]
    candidates.extend(word_through(board, p.coord, cross) for p in placements)

    words: List[FormedWord] = []
    seen = set()
    for word in candidates:
        key = tuple(word.coords)
        if len(word) >= 2 and key not in seen:
            seen.add(key)
            words.append(word)
    return words


def validate_words(words: Sequence[FormedWord], dictionary: Dictionary) -> Optional[ValidationError]:
    """Every formed word must be in the dictionary."""
    if not words:
        return ValidationError(
            code="NO_WORD_FORMED",
            message="Move must form at least one word of two or more letters",
        )
    for word in words:
        if not dictionary.contains(word.text):
            return ValidationError(
                code="INVALID_WORD",
                message=f"'{word.text.upper()}' is not a valid dictionary word",
                word=word.text.upper(),
                coord=word.coords[0],
            )
    return None


def _reject(placements: Sequence[TilePlacement], hand: Sequence[str], error: ValidationError) -> ValidationResult:
    log.debug("Rejected move %s: %s %s", [p.letter for p in placements], error.code, error.message)
    return ValidationResult(
        valid=False,
        errors=[error],
        placements=list(placements),
        hand_after=list(hand),
    )


def verify_move(
    board: Board,
    hand: Sequence[str],
    placements: Sequence[TilePlacement],
    dictionary: Dictionary,
) -> ValidationResult:
    """
    Main verification function: decide whether a candidate move is legal.

    Returns a ValidationResult with:
    - valid: True if every check passes
    - errors: the single rejection reason when invalid
    - words: words formed by the move, each as ordered board coordinates
    - hand_after: the hand with the placed tiles removed
    - grid: rendered board with the move applied (when valid)

    Scoring is left to the caller.
    """
    placements = list(placements)
    hand = normalize_hand(hand)

    error = validate_shape(placements) or validate_targets(board, placements)
    if error:
        return _reject(placements, hand, error)

    hand_after, error = consume_tiles(hand, placements)
    if error:
        return _reject(placements, hand, error)

    error = validate_line(board, placements) or validate_anchor(board, placements)
    if error:
        return _reject(placements, hand, error)

    after = apply_placements(board, placements)
    if not after.all_tiles_connected():
        return _reject(placements, hand, ValidationError(
            code="DISCONNECTED",
            message="Move leaves tiles that are not connected to the rest of the board",
        ))

    words = extract_words(after, placements)
    error = validate_words(words, dictionary)
    if error:
        return _reject(placements, hand, error)

    return ValidationResult(
        valid=True,
        placements=placements,
        words=words,
        hand_after=hand_after,
        grid=after.render(),
    )
