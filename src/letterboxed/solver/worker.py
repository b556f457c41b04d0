"""Main module for worker tasks in the parallel solver."""

from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized

from letterboxed.solver.search import Chain, search
from letterboxed.wordlist import create_word_map


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    start_time: float
    """Timestamp when the solver started, in seconds since the epoch."""

    words: list[str]
    """Legal words for this puzzle."""

    word_map: dict[str, list[str]]
    """Legal words bucketed by first letter."""

    all_letters: frozenset[str]
    """Letters that a solution must cover."""

    max_guesses: int
    """Maximum number of words in a solution chain."""

    best_len: Synchronized
    """Shared length of the shortest solution found by any worker."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(
    worker_ctr: Synchronized,
    best_len: Synchronized,
    start_time: float,
    words: list[str],
    all_letters: frozenset[str],
    max_guesses: int,
) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized): Shared counter for workers.
        best_len (Synchronized): Shared bound on the solution length.
        start_time (float): UNIX timestamp when the solver started.
        words (list[str]): Legal words for this puzzle.
        all_letters (frozenset[str]): Letters that a solution must cover.
        max_guesses (int): Maximum number of words in a solution chain.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        # Get and set the shared worker counter atomically, using the obtained value
        # as the worker index
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    worker_state = WorkerState(
        worker_idx=worker_idx,
        start_time=start_time,
        words=words,
        word_map=create_word_map(words),
        all_letters=all_letters,
        max_guesses=max_guesses,
        best_len=best_len,
    )
    print(f"Worker {worker_state.worker_idx} initialized.", flush=True)


def worker_task(start_word: str) -> Chain | None:
    """Worker task to search for the shortest chain beginning with a given word.

    Args:
        start_word (str): The first word of every chain explored by this task.

    Returns:
        The shortest solution starting with `start_word`, or None if there is none within the
        current shared bound.
    """
    # Ensure worker_state is initialized
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")

    return search(
        worker_state.words,
        worker_state.all_letters,
        max_guesses=worker_state.max_guesses,
        word_map=worker_state.word_map,
        start_words=[start_word],
        best_len=worker_state.best_len,
    )
