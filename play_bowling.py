#!/usr/bin/env python3
"""
Console front end for the bowling scoring engine.

Scores the built-in example game, a scripted line of roll tokens, or runs an
interactive loop that reads whitespace-separated tokens line by line.
"""

import argparse
import logging
from typing import Callable, Iterable, List, Optional

from bowling.exceptions import BowlingError
from bowling.formatting import format_score, format_summary
from bowling.game import ScoringEngine, create_game
from bowling.rules import ActionType, apply_action, parse_token
from bowling.settings import get_settings
from game_logger import GameLogger

logger = logging.getLogger(__name__)

# Strike and spare tokens can be replaced with 10s and the matching numbers
EXAMPLE_ROLLS = "8 / 5 4 9 0 X X 5 / 5 3 6 3 9 / 9 / X"

INSTRUCTIONS = (
    "Type 'q' to quit the game.\n"
    "Type 'r' to reset the game.\n"
    "Type a number 0-9 to bowl. x for strike, / for spare."
)


def run_tokens(
    tokens: Iterable[str],
    engine: Optional[ScoringEngine] = None,
    write: Callable[[str], None] = print,
) -> ScoringEngine:
    """
    Apply a sequence of roll tokens to a game.

    Rejected tokens are reported through ``write`` and skipped. Reset and
    quit tokens have no meaning in a scripted line and are rejected too.
    """
    engine = engine or create_game()
    for token in tokens:
        try:
            apply_action(engine, parse_token(token))
        except BowlingError as e:
            write(str(e))
    return engine


def run_example() -> ScoringEngine:
    """Score the example game."""
    return run_tokens(EXAMPLE_ROLLS.split())


def _read_tokens(read_line: Callable[[], str]) -> Optional[List[str]]:
    """Read up to the next non-blank line and split it into tokens, or None at end of input."""
    while True:
        try:
            line = read_line()
        except EOFError:
            return None
        tokens = line.split()
        if tokens:
            return tokens


def play_interactive(
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
    game_logger: Optional[GameLogger] = None,
) -> ScoringEngine:
    """
    Run the interactive loop until the player quits or input runs out.

    Each line may hold several tokens and blank lines are skipped. A finished
    game is announced and replaced by a fresh one. Returns the engine that was
    active when the loop ended.
    """
    write(INSTRUCTIONS)

    engine = create_game()
    if game_logger:
        game_logger.flush_engine_events(engine)

    pending: List[str] = []
    while True:
        write("\n" + format_score(engine))
        if engine.is_complete():
            write("\n=== Game complete. Starting a new one. ===")
            engine = _new_game(game_logger)
            continue

        if not pending:
            tokens = _read_tokens(read_line)
            if tokens is None:
                break
            pending = tokens

        token = pending.pop(0)
        try:
            action = parse_token(token)
        except BowlingError as e:
            write(str(e))
            continue

        if action.action_type == ActionType.QUIT:
            break
        if action.action_type == ActionType.RESET:
            logger.info("Game reset at frame %d", engine.get_active_frame_index() + 1)
            engine = _new_game(game_logger)
            continue

        try:
            apply_action(engine, action)
        except BowlingError as e:
            write(str(e))

        if game_logger:
            game_logger.flush_engine_events(engine)

    write("\n" + format_score(engine))
    return engine


def _new_game(game_logger: Optional[GameLogger]) -> ScoringEngine:
    engine = create_game()
    if game_logger:
        game_logger.reset_engine_cursor()
        game_logger.flush_engine_events(engine)
    return engine


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Score a game of ten-pin bowling")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--example",
        action="store_true",
        help="Score the example game and exit",
    )
    mode.add_argument(
        "--rolls",
        type=str,
        default=None,
        help="Whitespace-separated roll tokens to score, e.g. \"8 / 5 4 X\"",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=settings.log_file,
        help="Path to JSONL game log (default: disabled)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--quiet", action="store_true", help="Print only the total")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game_logger = GameLogger(args.log_file) if args.log_file else None

    if args.example or args.rolls is not None:
        if args.example:
            print("=== Example game ===")
            engine = run_example()
        else:
            engine = run_tokens(args.rolls.split())

        if game_logger:
            game_logger.flush_engine_events(engine)

        if not args.quiet:
            print(format_score(engine))
        print(format_summary(engine))
        return 0

    if get_settings().show_example:
        print("=== Example game ===")
        print(format_score(run_example()))

    print("=== Main game ===")
    play_interactive(game_logger=game_logger)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
