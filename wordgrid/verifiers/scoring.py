"""Move scoring under letter and word multipliers."""

from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .board import Board
from .models import Coord, FormedWord


# Standard English tile values
TILE_VALUES: Dict[str, int] = {
    **{c: 1 for c in "AEILNORSTU"},
    **{c: 2 for c in "DG"},
    **{c: 3 for c in "BCMP"},
    **{c: 4 for c in "FHVWY"},
    "K": 5,
    **{c: 8 for c in "JX"},
    **{c: 10 for c in "QZ"},
}


def tile_score(letter: str, tile_values: Mapping[str, int] = TILE_VALUES) -> int:
    """Face value of a tile; lowercase letters are blanks and worth nothing."""
    if letter.islower():
        return 0
    return tile_values.get(letter, 0)


def score_word(
    word: FormedWord,
    board: Board,
    new_coords: Set[Coord],
    tile_values: Mapping[str, int] = TILE_VALUES,
) -> int:
    """
    Score one formed word.

    ``board`` must already hold the move's tiles. Multipliers only count on
    squares in ``new_coords``; bonus squares covered on earlier turns add
    face value only.
    """
    total = 0
    word_factor = 1
    for coord, letter in zip(word.coords, word.text):
        value = tile_score(letter, tile_values)
        multiplier = board.bonuses.get(coord) if coord in new_coords else None
        if multiplier is not None:
            if multiplier.is_word:
                word_factor *= multiplier.factor
            else:
                value *= multiplier.factor
        total += value
    return total * word_factor


def score_move(
    words: Iterable[FormedWord],
    board: Board,
    new_coords: Iterable[Coord],
    tile_values: Optional[Mapping[str, int]] = None,
    full_hand_bonus: int = 0,
    hand_capacity: Optional[int] = None,
) -> Tuple[int, List[int]]:
    """
    Score every word formed by a move.

    Returns:
        Tuple of (total score, per-word scores). The full-hand bonus is added
        to the total when the move places ``hand_capacity`` tiles.
    """
    values = TILE_VALUES if tile_values is None else tile_values
    new = set(new_coords)
    word_scores = [score_word(w, board, new, values) for w in words]
    total = sum(word_scores)
    if full_hand_bonus and hand_capacity and len(new) >= hand_capacity:
        total += full_hand_bonus
    return total, word_scores
