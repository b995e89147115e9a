import logging
from typing import List, Optional, Sequence
from pydantic import BaseModel, Field, ConfigDict

from ..verifiers.board import Board
from ..verifiers.dictionary import Dictionary
from ..verifiers.models import TilePlacement, ValidationResult
from ..verifiers.scoring import score_move
from ..verifiers.verify import apply_placements, verify_move
from .models import GameConfig, TurnResult
from .player import Player

log = logging.getLogger(__name__)


class Game(BaseModel):
    """
    Owns the board for one game session.

    The board only changes through ``play``, which commits a move after it
    has been validated and scored. Turn order, tile drawing and player
    identity are left to the caller.

    Attributes:
        config: Board size, hand capacity and scoring tables
        board: The shared board
        dictionary: Word list used to check formed words
        history: Every submitted move, accepted or not
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    board: Board
    dictionary: Dictionary
    history: List[TurnResult] = Field(default_factory=list)

    @classmethod
    def create(cls, dictionary: Dictionary, config: Optional[GameConfig] = None) -> "Game":
        """
        Factory method to create a game with an empty board.

        Args:
            dictionary: Loaded word list
            config: Optional GameConfig; defaults to the 11x11 reference setup

        Returns:
            A new Game instance
        """
        config = config or GameConfig()
        board = Board(config.width, config.height, config.bonus_layout)
        return cls(config=config, board=board, dictionary=dictionary)

    @property
    def turn_number(self) -> int:
        return len(self.history) + 1

    def new_player(self, player_id: str, name: Optional[str] = None, hand: Sequence[str] = ()) -> Player:
        """Player sized to this game's hand capacity."""
        return Player(
            player_id=player_id,
            name=name or "",
            hand=list(hand),
            capacity=self.config.hand_capacity,
        )

    def submit(self, hand: Sequence[str], placements: Sequence[TilePlacement]) -> ValidationResult:
        """
        Validate and score a move without changing anything.

        Returns:
            ValidationResult; when valid, ``score`` and ``word_scores`` are filled in
        """
        result = verify_move(self.board, hand, placements, self.dictionary)
        if not result.valid:
            return result

        after = apply_placements(self.board, result.placements)
        total, word_scores = score_move(
            result.words,
            after,
            [p.coord for p in result.placements],
            tile_values=self.config.tile_values,
            full_hand_bonus=self.config.full_hand_bonus,
            hand_capacity=self.config.hand_capacity,
        )
        return result.model_copy(update={"score": total, "word_scores": word_scores})

    def commit(self, result: ValidationResult) -> None:
        """
        Write an accepted move onto the board.

        Raises:
            ValueError: If the result was a rejection
        """
        if not result.valid:
            raise ValueError("Cannot commit a rejected move")
        for p in result.placements:
            self.board.place(p.coord, p.letter)

    def play(self, player: Player, placements: Sequence[TilePlacement]) -> TurnResult:
        """
        Submit a move for a player and commit it if legal.

        On success the board gains the tiles, the player's hand loses them and
        their score increases. A rejected move leaves everything unchanged.
        The turn is recorded in ``history`` either way.
        """
        tiles_before = list(player.hand)
        result = self.submit(player.hand, placements)

        turn = TurnResult(
            player_id=player.player_id,
            turn_number=self.turn_number,
            placements=list(placements),
            validation=result,
            tiles_before=tiles_before,
            tiles_after=tiles_before,
        )

        if result.valid:
            self.commit(result)
            player.hand = list(result.hand_after)
            player.score += result.score
            player.turn_count += 1
            turn.tiles_after = list(result.hand_after)
            turn.score = result.score
            turn.committed = True
            log.info(
                "%s played %s for %d points",
                player.name, ", ".join(result.word_texts), result.score,
            )

        self.history.append(turn)
        return turn

    def get_state(self) -> dict:
        """
        Get the current game state as a dictionary.

        Returns:
            Dictionary containing game state
        """
        return {
            "width": self.board.width,
            "height": self.board.height,
            "tiles_on_board": self.board.count_tiles(),
            "turns": len(self.history),
            "board": self.board.render(),
        }
