"""
Player class for managing an individual player's hand and score.
"""

from typing import List, Dict
from pydantic import BaseModel, Field, field_validator

from ..verifiers.models import BLANK
from .models import HAND_LIMIT


def _normalize(tile: str) -> str:
    tile = tile.upper()
    if tile != BLANK and not (len(tile) == 1 and tile.isalpha()):
        raise ValueError(f"Invalid tile: '{tile}'")
    return tile


class Player(BaseModel):
    """
    Holds one player's hand and running score.

    The hand is a multiset of uppercase letters and blanks ('?') and never
    grows beyond ``capacity``.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name for the player
        hand: Tiles currently in hand
        capacity: Maximum hand size
        score: Total points from committed moves
    """

    player_id: str
    name: str = ""
    hand: List[str] = Field(default_factory=list)
    capacity: int = Field(default=HAND_LIMIT, ge=1)
    score: int = 0
    turn_count: int = 0

    @field_validator('hand')
    @classmethod
    def _normalize_hand(cls, hand: List[str]) -> List[str]:
        return [_normalize(t) for t in hand]

    def model_post_init(self, __context) -> None:
        """Set default name and check the starting hand size."""
        if not self.name:
            self.name = f"Player {self.player_id}"
        if len(self.hand) > self.capacity:
            raise ValueError(
                f"Hand of {len(self.hand)} tiles exceeds capacity {self.capacity}"
            )

    @property
    def tiles_in_hand(self) -> int:
        """Number of tiles currently in hand."""
        return len(self.hand)

    @property
    def space_in_hand(self) -> int:
        """How many tiles can still be drawn."""
        return self.capacity - len(self.hand)

    @property
    def hand_summary(self) -> Dict[str, int]:
        """Get a count of each tile in hand."""
        summary: Dict[str, int] = {}
        for tile in self.hand:
            summary[tile] = summary.get(tile, 0) + 1
        return dict(sorted(summary.items()))

    def add_tiles(self, tiles: List[str]) -> None:
        """
        Add drawn tiles to the hand.

        Raises:
            ValueError: If the hand would exceed capacity
        """
        tiles = [_normalize(t) for t in tiles]
        if len(self.hand) + len(tiles) > self.capacity:
            raise ValueError(
                f"Cannot add {len(tiles)} tiles to a hand of {len(self.hand)} "
                f"(capacity {self.capacity})"
            )
        self.hand.extend(tiles)

    def has_tile(self, tile: str) -> bool:
        """Check if player has a specific tile."""
        return tile.upper() in self.hand

    def set_hand(self, tiles: List[str]) -> None:
        """Replace the hand, e.g. with a rack read from input."""
        tiles = [_normalize(t) for t in tiles]
        if len(tiles) > self.capacity:
            raise ValueError(
                f"Hand of {len(tiles)} tiles exceeds capacity {self.capacity}"
            )
        self.hand = tiles
