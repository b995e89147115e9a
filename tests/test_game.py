"""
Test suite for the game session and player hands.

Covers the validate -> score -> commit path, configuration models and
hand capacity rules.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from wordgrid.environment import (
    HAND_LIMIT,
    BonusSquare,
    Game,
    GameConfig,
    Player,
    default_bonus_layout,
)
from wordgrid.verifiers import Coord, Dictionary, Multiplier, TilePlacement


WORDS = Dictionary.from_words(["CAT", "CATS", "DOG", "DOGS", "AT", "TA"])


def tiles(word, row, col, direction="H"):
    dr, dc = (0, 1) if direction == "H" else (1, 0)
    return [
        TilePlacement(coord=(row + i * dr, col + i * dc), letter=letter)
        for i, letter in enumerate(word)
    ]


@pytest.fixture
def game():
    """Game on a plain 11x11 board."""
    return Game.create(dictionary=WORDS, config=GameConfig(bonus_squares=[]))


class TestPlay:
    """Test committing moves through the game."""

    def test_legal_move_commits(self, game):
        """A legal move lands on the board, leaves the hand and scores."""
        player = game.new_player("p1", hand=list("CATSDOG"))
        turn = game.play(player, tiles("CAT", 5, 4))

        assert turn.committed is True
        assert turn.score == 5
        assert player.score == 5
        assert player.hand == ["S", "D", "O", "G"]
        assert turn.tiles_before == list("CATSDOG")
        assert turn.tiles_after == ["S", "D", "O", "G"]
        assert game.board.placed_coords() == {Coord(5, 4), Coord(5, 5), Coord(5, 6)}
        assert [game.board.letter_at((5, c)) for c in range(4, 7)] == ["C", "A", "T"]

    def test_rejected_move_changes_nothing(self, game):
        """An invalid word leaves board and hand as they were."""
        player = game.new_player("p1", hand=list("TCA"))
        turn = game.play(player, tiles("TCA", 5, 4))

        assert turn.committed is False
        assert turn.validation.error.code == "INVALID_WORD"
        assert turn.validation.error.word == "TCA"
        assert game.board.is_board_empty()
        assert player.hand == ["T", "C", "A"]
        assert player.score == 0

    def test_history_records_every_turn(self, game):
        """Accepted and rejected turns are both recorded, numbered in order."""
        player = game.new_player("p1", hand=list("CATSDOG"))
        game.play(player, tiles("CAT", 0, 0))
        game.play(player, tiles("CAT", 5, 4))
        game.play(player, tiles("S", 5, 7))

        assert [t.turn_number for t in game.history] == [1, 2, 3]
        assert [t.committed for t in game.history] == [False, True, True]
        assert game.history[0].validation.error.code == "MUST_COVER_CENTER"
        assert player.score == 5 + 6
        assert player.turn_count == 2

    def test_second_move_must_touch(self, game):
        """A second move away from the first is rejected."""
        player = game.new_player("p1", hand=list("CATDOG"))
        game.play(player, tiles("CAT", 5, 4))
        turn = game.play(player, tiles("DOG", 0, 0))
        assert turn.validation.error.code == "DISCONNECTED"
        assert game.board.count_tiles() == 3

    def test_full_hand_bonus(self):
        """Playing every tile in the hand earns the bonus."""
        config = GameConfig(bonus_squares=[], hand_capacity=3, full_hand_bonus=20)
        game = Game.create(dictionary=WORDS, config=config)
        player = game.new_player("p1", hand=list("DOG"))
        turn = game.play(player, tiles("DOG", 5, 4))
        assert turn.score == 2 + 1 + 2 + 20
        assert player.hand == []


class TestSubmitAndCommit:
    """Test the non-mutating submit and explicit commit."""

    def test_submit_does_not_mutate(self, game):
        """submit scores without touching the board."""
        result = game.submit(list("CAT"), tiles("CAT", 5, 4))
        assert result.valid is True
        assert result.score == 5
        assert result.word_scores == [5]
        assert game.board.is_board_empty()

    def test_commit_places_tiles(self, game):
        """commit writes exactly the submitted tiles."""
        result = game.submit(list("CAT"), tiles("CAT", 5, 4))
        game.commit(result)
        assert game.board.count_tiles() == 3

    def test_commit_rejected_move(self, game):
        """Rejected results cannot be committed."""
        result = game.submit(list("CAT"), tiles("CAT", 0, 0))
        with pytest.raises(ValueError):
            game.commit(result)

    def test_submit_uses_bonus_layout(self):
        """Configured bonus squares feed into scoring."""
        config = GameConfig(bonus_squares=[BonusSquare(row=5, col=4, multiplier="DW")])
        game = Game.create(dictionary=WORDS, config=config)
        result = game.submit(list("CAT"), tiles("CAT", 5, 4))
        assert result.score == 10

    def test_get_state(self, game):
        """State summarizes the board."""
        player = game.new_player("p1", hand=list("CAT"))
        game.play(player, tiles("CAT", 5, 4))
        state = game.get_state()
        assert state["tiles_on_board"] == 3
        assert state["turns"] == 1
        assert "CAT" in state["board"]

    def test_submit_lowercase_hand(self, game):
        """submit accepts a hand written in lowercase."""
        result = game.submit(["c", "a", "t"], tiles("CAT", 5, 4))
        assert result.valid is True
        assert result.score == 5
        assert result.hand_after == []


class TestGameConfig:
    """Test configuration models."""

    def test_defaults(self):
        """Defaults match the reference setup."""
        config = GameConfig()
        assert (config.width, config.height) == (11, 11)
        assert config.hand_capacity == HAND_LIMIT == 7
        assert config.tile_values["Z"] == 10

    def test_default_layout_is_symmetric(self):
        """The default bonus layout mirrors across both axes."""
        layout = GameConfig().bonus_layout
        for (r, c), multiplier in layout.items():
            assert layout[Coord(10 - r, c)] is multiplier
            assert layout[Coord(r, 10 - c)] is multiplier
        assert Coord(5, 5) not in layout
        assert layout[Coord(0, 2)] is Multiplier.TRIPLE_WORD

    def test_default_layout_clipped_to_small_board(self):
        """Bonus squares outside a small board are dropped."""
        layout = default_bonus_layout(3, 3)
        assert all(0 <= r < 3 and 0 <= c < 3 for r, c in layout)

    def test_unknown_key_rejected(self):
        """Unknown config keys are errors."""
        with pytest.raises(PydanticValidationError):
            GameConfig(board_size=15)

    def test_bonus_outside_board_rejected(self):
        """Bonus squares must fit the configured board."""
        with pytest.raises(PydanticValidationError):
            GameConfig(width=5, height=5, bonus_squares=[{"row": 5, "col": 0, "multiplier": "TW"}])

    def test_invalid_multiplier_rejected(self):
        """Only DL, TL, DW and TW are multipliers."""
        with pytest.raises(PydanticValidationError):
            BonusSquare(row=0, col=0, multiplier="QW")

    def test_board_matches_config(self):
        """Game.create sizes the board from the config."""
        game = Game.create(dictionary=WORDS, config=GameConfig(width=9, height=7, bonus_squares=[]))
        assert (game.board.width, game.board.height) == (9, 7)
        assert game.board.bonuses == {}


class TestPlayer:
    """Test hand management."""

    def test_default_name(self):
        """Players get a default display name."""
        assert Player(player_id="p1").name == "Player p1"

    def test_hand_normalized(self):
        """Tiles are uppercased."""
        player = Player(player_id="p1", hand=["c", "a", "?"])
        assert player.hand == ["C", "A", "?"]
        assert player.hand_summary == {"?": 1, "A": 1, "C": 1}

    def test_add_tiles_up_to_capacity(self):
        """Drawing fills the hand up to capacity."""
        player = Player(player_id="p1", hand=list("CAT"))
        player.add_tiles(list("DOGS"))
        assert player.tiles_in_hand == 7
        assert player.space_in_hand == 0

    def test_add_tiles_over_capacity(self):
        """Drawing past capacity raises ValueError."""
        player = Player(player_id="p1", hand=list("CATDOGS"))
        with pytest.raises(ValueError):
            player.add_tiles(["E"])
        assert player.tiles_in_hand == 7

    def test_starting_hand_over_capacity(self):
        """A hand larger than capacity is rejected at construction."""
        with pytest.raises(ValueError):
            Player(player_id="p1", hand=list("ABCDEFGH"))

    def test_invalid_tile(self):
        """Only letters and blanks are tiles."""
        with pytest.raises(ValueError):
            Player(player_id="p1", hand=["1"])

    def test_set_hand(self):
        """set_hand replaces the tiles."""
        player = Player(player_id="p1", hand=list("CAT"))
        player.set_hand(list("dog"))
        assert player.hand == ["D", "O", "G"]
        assert player.has_tile("d")
