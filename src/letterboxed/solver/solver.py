"""Main solver module for Letter Boxed puzzles."""

import os
import sys
from collections.abc import Iterable
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from io import StringIO
from multiprocessing import Value
from multiprocessing.sharedctypes import Synchronized
from pathlib import Path
from pprint import pprint
from time import time
from typing import Literal, TextIO

from letterboxed.board import Board
from letterboxed.puzzle_config import InvalidGridError, PuzzleConfig
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.parallel import solve_with_parallel_starts
from letterboxed.solver.search import Chain, SearchStats, search
from letterboxed.solver.task_args import TaskArgs
from letterboxed.solver.utils import TIMESTAMP_FMT, int_comma, time_str, validate_solution
from letterboxed.solver.worker import init_worker_globals
from letterboxed.wordlist import create_word_map


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a solver run.

    `status` is "success" when `solution` holds a validated chain, "no_solution" when the
    search space was exhausted, and "invalid_solution" when the search returned a chain that
    failed validation (a solver bug; the chain is discarded).
    """

    status: Literal["success", "no_solution", "invalid_solution"]
    solution: Chain | None = None

    @property
    def found(self) -> bool:
        """Whether a valid solution was found."""
        return self.status == "success"

    def __str__(self) -> str:
        """Return a string representation of the result."""
        if self.solution is None:
            return "No solution found."
        return f"Solution found: {' - '.join(self.solution)}"


def _invalid_grid(grid: str) -> InvalidGridError:
    return InvalidGridError(
        f"Invalid grid '{grid}': expected four sides of three distinct letters A-Z."
    )


def get_executor(*, n_workers: int | None = None, task_args: TaskArgs) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor.

    Args:
        n_workers (int | None): Number of worker processes to create.  If None,
            defaults to number of CPU cores minus one.
        task_args (TaskArgs): Legal words and puzzle configuration to pass to workers.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    worker_ctr: Synchronized = Value("i", 0)
    best_len: Synchronized = Value("i", task_args.max_guesses)

    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, cpus - 1)  # Leave one core free
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(
            worker_ctr,
            best_len,
            task_args.start_time,
            task_args.words,
            task_args.all_letters,
            task_args.max_guesses,
        ),
    )


def solve(
    board: Board,
    *,
    max_guesses: int | None = None,
    logf: TextIO | None = None,
    use_parallel: bool | None = None,
) -> SolveResult:
    """Find the shortest chain of legal words that uses every letter of the board.

    Args:
        board (Board): The puzzle board and its dictionary.
        max_guesses (int | None): Maximum number of words in the chain.  Defaults to the
            solver config.
        logf: File object to log the solving process.  Discarded if None.
        use_parallel (bool | None): Whether to use worker processes.  Defaults to the
            solver config.

    Returns:
        A SolveResult holding the solution chain, or the reason there is none.

    Raises:
        InvalidGridError: If the board is not four sides of three distinct letters.
    """
    if not board.is_valid():
        raise _invalid_grid(str(board))
    if max_guesses is None:
        max_guesses = solver_config.max_guesses
    if use_parallel is None:
        use_parallel = solver_config.use_parallel
    if logf is None:
        logf = StringIO()

    puzzle_config = PuzzleConfig(grid=str(board), max_guesses=max_guesses)
    words = board.generate_words()
    task_args = TaskArgs(config=puzzle_config, words=words, all_letters=board.all_letters)

    start_time_str = (
        datetime.fromtimestamp(task_args.start_time).astimezone().strftime(TIMESTAMP_FMT)
    )
    print(f"Selected puzzle: {puzzle_config}", file=logf, flush=True)
    print(f"Start time: {start_time_str}", file=logf, flush=True)
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)
    print(f"Dictionary words: {int_comma(len(board.dictionary))}", file=logf, flush=True)
    print(f"Legal words: {int_comma(len(words))}", file=logf, flush=True)

    solution: Chain | None = None
    if use_parallel:
        print("Solver initialized with:", file=logf, flush=True)
        pprint(task_args.summary(), stream=logf, width=120)
        with get_executor(n_workers=solver_config.max_workers, task_args=task_args) as executor:
            try:
                solution = solve_with_parallel_starts(executor, task_args, logf)
            except (KeyboardInterrupt, Exception):
                executor.shutdown(wait=False, cancel_futures=True)
                raise
    else:
        print("Using best-first search...", file=logf, flush=True)
        stats = SearchStats(start_time=task_args.start_time)
        solution = search(
            words,
            board.all_letters,
            max_guesses=max_guesses,
            word_map=create_word_map(words),
            stats=stats,
            logf=logf,
        )
        print(
            f"States explored: {int_comma(stats.states_popped)}, "
            f"queued: {int_comma(stats.states_pushed)}",
            file=logf,
            flush=True,
        )

    print(f"Time taken: {time_str(time() - task_args.start_time)}", file=logf, flush=True)
    return _check_solution(solution, board, max_guesses, logf)


def _check_solution(
    solution: Chain | None, board: Board, max_guesses: int, logf: TextIO
) -> SolveResult:
    """Validate the chain returned by the search and wrap it in a SolveResult."""
    if solution is None:
        print("No solution found.", file=logf, flush=True)
        return SolveResult(status="no_solution")

    if not validate_solution(solution, board.all_letters, max_guesses):
        msg = f"INTERNAL ERROR: search returned an invalid chain {list(solution)} for {board}"
        print(msg, file=logf, flush=True)
        print(msg, file=sys.stderr, flush=True)
        return SolveResult(status="invalid_solution")

    result = SolveResult(status="success", solution=solution)
    print(result, file=logf, flush=True)
    return result


def run(
    config: PuzzleConfig, words: Iterable[str], *, use_parallel: bool | None = None
) -> SolveResult:
    """Run the solver on the given configuration, logging to a file.

    Args:
        config (PuzzleConfig): The configuration for the puzzle to solve.
        words (Iterable[str]): The dictionary to play against.
        use_parallel (bool | None): Whether to use worker processes.  Defaults to the
            solver config.

    Raises:
        InvalidGridError: If the grid is not four sides of three distinct letters.
    """
    print(f"config: {config}")
    board = Board(config.grid, words)
    if not board.is_valid():
        raise _invalid_grid(config.grid)
    board.print()

    grid_str = config.grid.replace(",", "_")
    logfile = Path(solver_config.log_dir) / f"{grid_str}-{config.max_guesses}.log"
    print(f"Log file: {logfile}")

    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            result = solve(
                board, max_guesses=config.max_guesses, logf=logf, use_parallel=use_parallel
            )
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)
    print(result)
    return result
