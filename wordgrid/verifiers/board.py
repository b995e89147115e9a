"""Fixed-size game board with connectivity and adjacency queries."""

from collections import deque
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from .models import Cell, Coord, Multiplier


# Reference board size
BOARD_WIDTH = 11
BOARD_HEIGHT = 11

# Von Neumann neighborhood: used for connectivity
ORTHOGONAL: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# King-move neighborhood: used for placement adjacency
SURROUNDING: Tuple[Tuple[int, int], ...] = ORTHOGONAL + ((-1, -1), (-1, 1), (1, -1), (1, 1))


class BoardError(Exception):
    """Base class for raw board mutation failures."""


class OutOfBounds(BoardError, IndexError):
    """Coordinate lies outside the grid."""

    def __init__(self, coord: Coord, width: int, height: int):
        self.coord = coord
        super().__init__(f"{coord} is outside the {width}x{height} board")


class CellOccupied(BoardError, ValueError):
    """Target cell already holds a tile."""

    def __init__(self, coord: Coord, letter: str):
        self.coord = coord
        super().__init__(f"{coord} already holds '{letter}'")


class Board:
    """
    Rectangular grid of cells, indexed row then column.

    Letters live in ``tiles`` and bonus squares in ``bonuses``; the two are
    tracked separately so a covered bonus square keeps its multiplier.
    Dimensions never change after construction. Tiles are only ever added,
    never removed.
    """

    def __init__(
        self,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        bonuses: Optional[Dict[Coord, Multiplier]] = None,
    ):
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.tiles: List[List[Optional[str]]] = [[None] * width for _ in range(height)]
        self.bonuses: Dict[Coord, Multiplier] = {}
        for coord, multiplier in (bonuses or {}).items():
            coord = Coord(*coord)
            self._check_bounds(coord)
            self.bonuses[coord] = Multiplier(multiplier)

    @property
    def center(self) -> Coord:
        return Coord(self.height // 2, self.width // 2)

    def in_bounds(self, coord: Tuple[int, int]) -> bool:
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width

    def _check_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise OutOfBounds(coord, self.width, self.height)

    def cell_at(self, coord: Tuple[int, int]) -> Cell:
        """Cell at coord; raises OutOfBounds outside the grid."""
        coord = Coord(*coord)
        self._check_bounds(coord)
        return Cell(letter=self.tiles[coord.row][coord.col], multiplier=self.bonuses.get(coord))

    def letter_at(self, coord: Tuple[int, int]) -> Optional[str]:
        """Letter at coord, or None when empty or off the board."""
        if not self.in_bounds(coord):
            return None
        return self.tiles[coord[0]][coord[1]]

    def is_occupied(self, coord: Tuple[int, int]) -> bool:
        return self.letter_at(coord) is not None

    def place(self, coord: Tuple[int, int], letter: str) -> None:
        """
        Put a letter on an empty cell.

        No game rules are checked here; callers validate the move first.

        Raises:
            OutOfBounds: If coord is outside the grid
            CellOccupied: If the cell already holds a tile
        """
        coord = Coord(*coord)
        self._check_bounds(coord)
        existing = self.tiles[coord.row][coord.col]
        if existing is not None:
            raise CellOccupied(coord, existing)
        self.tiles[coord.row][coord.col] = letter

    def placed_coords(self) -> Set[Coord]:
        """Coordinates of every tile on the board."""
        return {
            Coord(r, c)
            for r in range(self.height)
            for c in range(self.width)
            if self.tiles[r][c] is not None
        }

    def is_board_empty(self) -> bool:
        return all(letter is None for row in self.tiles for letter in row)

    def count_tiles(self) -> int:
        return len(self.placed_coords())

    def neighbors(self, coord: Coord, offsets: Iterable[Tuple[int, int]] = ORTHOGONAL) -> Iterator[Coord]:
        """In-bounds neighbors of coord; no wraparound."""
        for dr, dc in offsets:
            row, col = coord[0] + dr, coord[1] + dc
            if 0 <= row < self.height and 0 <= col < self.width:
                yield Coord(row, col)

    def all_tiles_connected(self) -> bool:
        """
        True if the placed tiles form a single 4-connected group.

        An empty board is trivially connected. Breadth-first search from an
        arbitrary tile, removing each reached tile from the unvisited set;
        anything left over once the queue drains is a separate island.
        """
        unvisited = self.placed_coords()
        if not unvisited:
            return True

        start = unvisited.pop()
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in self.neighbors(current, ORTHOGONAL):
                if neighbor in unvisited and self.is_occupied(neighbor):
                    unvisited.remove(neighbor)
                    queue.append(neighbor)

        return not unvisited

    def adjacent_to_existing_tile(self, coord: Tuple[int, int]) -> bool:
        """True if any of the eight surrounding cells (diagonals included) holds a tile."""
        return any(self.is_occupied(n) for n in self.neighbors(Coord(*coord), SURROUNDING))

    def copy(self) -> "Board":
        """Independent copy, safe to mutate for speculative moves."""
        board = Board(self.width, self.height, self.bonuses)
        board.tiles = [row[:] for row in self.tiles]
        return board

    def render(self) -> str:
        """
        Bordered text dump of the board.

        Empty cells are blank, tiles show their letter and uncovered bonus
        squares show their multiplier glyph.
        """
        border = "-" * (self.width + 2)
        lines = [border]
        for r in range(self.height):
            row = ""
            for c in range(self.width):
                letter = self.tiles[r][c]
                if letter is not None:
                    row += letter
                elif Coord(r, c) in self.bonuses:
                    row += self.bonuses[Coord(r, c)].glyph
                else:
                    row += " "
            lines.append(f"|{row}|")
        lines.append(border)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.tiles == other.tiles
            and self.bonuses == other.bonuses
        )

    # Mutable; compared by contents, never hashed
    __hash__ = None
