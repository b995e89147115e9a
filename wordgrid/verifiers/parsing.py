"""Move text parsing utilities."""

import re
from typing import List, Optional, Tuple

from .board import Board
from .models import Coord, TilePlacement, ValidationError


TILE_PATTERN = r'^([A-Za-z])@(\d+),(\d+)$'
WORD_PATTERN = r'^([A-Za-z]{2,})@(\d+),(\d+)\s+([HV])$'
RACK_PATTERN = r'^([A-Za-z?]*)\s*:\s*(.*)$'


def split_rack(line: str) -> Tuple[Optional[List[str]], str]:
    """Split an optional ``RACK:`` prefix off a move line."""
    match = re.match(RACK_PATTERN, line.strip())
    if not match:
        return None, line.strip()
    return [t.upper() for t in match.group(1)], match.group(2).strip()


def parse_word(
    match: re.Match, board: Optional[Board]
) -> Tuple[List[TilePlacement], List[ValidationError]]:
    """Expand ``WORD@R,C H|V`` into tiles, skipping squares that already hold the letter."""
    word = match.group(1)
    row, col = int(match.group(2)), int(match.group(3))
    dr, dc = (0, 1) if match.group(4).upper() == 'H' else (1, 0)

    placements: List[TilePlacement] = []
    errors: List[ValidationError] = []
    for i, letter in enumerate(word):
        coord = Coord(row + i * dr, col + i * dc)
        existing = board.letter_at(coord) if board is not None else None
        if existing is None:
            placements.append(TilePlacement(coord=coord, letter=letter))
        elif existing.upper() != letter.upper():
            errors.append(ValidationError(
                code="PARSE_ERROR",
                message=f"'{word}' needs '{letter}' at {coord} but the board has '{existing}'",
                word=word.upper(),
                coord=coord,
            ))
    return placements, errors


def parse_move(
    text: str, board: Optional[Board] = None
) -> Tuple[Optional[List[str]], List[TilePlacement], List[ValidationError]]:
    """
    Parse one move line into tile placements with error collection.

    Accepted forms (lowercase letters are blanks):
        C@5,4 A@5,5 T@5,6
        CAT@5,4 H
    Either may be prefixed with the rack to play from, e.g. ``CATSXYZ: ...``.

    Returns a tuple of (rack or None, placements, errors).
    """
    rack, body = split_rack(text)
    errors: List[ValidationError] = []

    if not body:
        errors.append(ValidationError(code="PARSE_ERROR", message="Move is empty"))
        return rack, [], errors

    word_match = re.match(WORD_PATTERN, body, re.IGNORECASE)
    if word_match:
        placements, errors = parse_word(word_match, board)
        return rack, placements, errors

    placements: List[TilePlacement] = []
    for token in body.split():
        match = re.match(TILE_PATTERN, token)
        if not match:
            errors.append(ValidationError(
                code="PARSE_ERROR",
                message=f"Invalid tile format: '{token}' (expected LETTER@ROW,COL)",
            ))
            continue

        placements.append(TilePlacement(
            coord=Coord(int(match.group(2)), int(match.group(3))),
            letter=match.group(1),
        ))

    return rack, placements, errors
