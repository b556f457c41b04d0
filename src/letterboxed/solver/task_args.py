"""Solver task arguments for Letter Boxed puzzles."""

from datetime import datetime
from time import time

from letterboxed.puzzle_config import PuzzleConfig
from letterboxed.solver.utils import TIMESTAMP_FMT


class TaskArgs:
    """Wrapper for task arguments for the solver.

    Pickleable, so that it can be used with multiprocessing (passed to worker processes).
    """

    def __init__(
        self, *, config: PuzzleConfig, words: list[str], all_letters: frozenset[str]
    ) -> None:
        """Initialize the solver with the given configuration and legal words.

        Args:
            config (PuzzleConfig): The configuration for the puzzle.
            words (list[str]): The legal words for the board, in dictionary order.
            all_letters (frozenset[str]): The letters of the board.
        """
        self.puzzle_config = config.to_dict()
        """dict representing the puzzle configuration."""

        self.words = words
        """List of legal words."""

        self.all_letters = all_letters
        """Letters that a solution must cover."""

        self.start_time = time()
        """Timestamp when the solver started, in seconds since the epoch."""

    @property
    def max_guesses(self) -> int:
        """Maximum number of words in a solution chain."""
        return self.puzzle_config["max_guesses"]

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the task arguments.

        Note: the first-letter word map is intentionally not stored on TaskArgs (to reduce
        per-task pickling overhead).
        """
        return {
            "puzzle_config": dict(self.puzzle_config),
            "words_count": len(self.words),
            "letters": "".join(sorted(self.all_letters)),
            "start_time": datetime.fromtimestamp(self.start_time)
            .astimezone()
            .strftime(TIMESTAMP_FMT),
        }
