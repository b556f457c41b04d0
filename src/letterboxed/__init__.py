"""Letter Boxed Puzzle Solver.

Finds the shortest chain of dictionary words that uses every letter of a Letter Boxed grid.
Each word must start with the last letter of the word before it, and no word may take two
consecutive letters from the same side of the box.  Uses a best-first search ordered by
chain length, so the first covering chain found is also the shortest.
"""

import argparse
from sys import exit

from .puzzle_config import INVALID_GRID_MSG, InvalidGridError, PuzzleConfig
from .solver import solver
from .solver.config import config as solver_config
from .wordlist import load_word_list


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(description="Letter Boxed puzzle solver")
    parser.add_argument(
        "-g",
        "--grid",
        type=str,
        required=True,
        help='The box of letters, sides separated by commas, e.g. "abc,def,ghi,jkl"',
    )
    parser.add_argument(
        "-m",
        "--max-guesses",
        type=int,
        default=None,
        help=f"The maximum number of words in a solution (default: {solver_config.max_guesses})",
    )
    parser.add_argument(
        "-w",
        "--words",
        type=str,
        default=None,
        help=f"Path to the word list, one word per line (default: {solver_config.word_list_path})",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Search from each start word in a separate worker process",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the Letter Boxed solver."""
    args = build_parser().parse_args(argv)
    max_guesses = solver_config.max_guesses if args.max_guesses is None else args.max_guesses

    try:
        config = PuzzleConfig(grid=args.grid, max_guesses=max_guesses)
    except ValueError as e:
        print(e)
        exit(2)
    if not config.has_valid_shape():
        print(INVALID_GRID_MSG)
        exit(2)

    try:
        words = load_word_list(args.words)
    except FileNotFoundError as e:
        print(e)
        exit(1)

    try:
        result = solver.run(config, words, use_parallel=args.parallel or None)
    except InvalidGridError:
        print(INVALID_GRID_MSG)
        exit(2)

    exit(0 if result.found else 1)
