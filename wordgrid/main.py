"""
Main entry point for replaying moves against the wordgrid engine.

Usage:
    python -m wordgrid.main --words word-list.txt
    python -m wordgrid.main config.yaml --moves moves.txt --verbose
    python -m wordgrid.main config.yaml --moves moves.txt --output results/game.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .environment import Game, GameConfig
from .verifiers import Dictionary, WordListError, parse_move

DEFAULT_WORD_LIST = "word-list.txt"


def load_config(config_path: Optional[str]) -> GameConfig:
    """Load game configuration from a YAML file, or defaults when no path is given."""
    if not config_path:
        return GameConfig()

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def replay(game: Game, moves_path: str, verbose: bool = False) -> int:
    """
    Play each line of a moves file as one turn for a single player.

    A line may start with ``RACK:`` to set the hand before the move; otherwise
    the tiles left over from the previous turn are used. Blank lines and lines
    starting with '#' are skipped.

    Returns:
        Number of rejected moves
    """
    player = game.new_player("p1")
    rejected = 0

    with open(moves_path) as f:
        lines = [line.strip() for line in f]

    for line_no, line in enumerate(lines, start=1):
        if not line or line.startswith("#"):
            continue

        rack, placements, errors = parse_move(line, game.board)
        if errors:
            rejected += 1
            for e in errors:
                print(f"line {line_no}: {e.code}: {e.message}")
            continue

        if rack is not None:
            try:
                player.set_hand(rack)
            except ValueError as e:
                rejected += 1
                print(f"line {line_no}: BAD_RACK: {e}")
                continue

        turn = game.play(player, placements)
        result = turn.validation
        if turn.committed:
            words = ", ".join(
                f"{w.text.upper()} ({s})" for w, s in zip(result.words, result.word_scores)
            )
            print(f"line {line_no}: +{turn.score} {words}  [total {player.score}]")
        else:
            rejected += 1
            print(f"line {line_no}: {result.error.code}: {result.error.message}")

        if verbose:
            print(game.board.render())
            print(f"hand: {''.join(player.hand) or '-'}")

    print()
    print(game.board.render())
    print(f"Final score: {player.score}")
    return rejected


def main():
    parser = argparse.ArgumentParser(
        description="Validate and score word-grid moves",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  width: 11
  height: 11
  hand_capacity: 7
  word_list: word-list.txt
  full_hand_bonus: 50

Example moves file:
  CATSDOG: C@5,4 A@5,5 T@5,6
  SDOG: S@5,7
  DOG@2,7 V
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--words", "-w",
        help=f"Path to the word list (overrides config; default: {DEFAULT_WORD_LIST})"
    )
    parser.add_argument(
        "--moves", "-m",
        help="File with one move per line to replay"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the turn history as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the board after every move and enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    word_list = args.words or config.word_list or DEFAULT_WORD_LIST
    try:
        dictionary = Dictionary.load(word_list)
    except WordListError as e:
        print(f"Error loading word list: {e}", file=sys.stderr)
        return 1

    game = Game.create(dictionary=dictionary, config=config)

    if not args.moves:
        print(game.board.render())
        return 0

    try:
        rejected = replay(game, args.moves, verbose=args.verbose)
    except (OSError, ValueError) as e:
        print(f"Error replaying {args.moves}: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(
                {
                    "config": config.model_dump(mode="json"),
                    "state": game.get_state(),
                    "history": [t.model_dump(mode="json") for t in game.history],
                },
                f,
                indent=2,
            )
        print(f"Results saved to: {output_path}")

    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
