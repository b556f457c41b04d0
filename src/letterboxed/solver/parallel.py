"""Implementation of the parallel solver: task distribution and worker management."""

import traceback
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Literal, TextIO

from letterboxed.solver.search import Chain
from letterboxed.solver.task_args import TaskArgs
from letterboxed.solver.worker import worker_task


def solve_with_parallel_starts(
    executor: ProcessPoolExecutor,
    task_args: TaskArgs,
    logf: TextIO,
) -> Chain | None:
    """Solve the puzzle by searching from each start word in a separate task.

    Every task reports the shortest chain beginning with its start word.  Tasks share only
    the best chain length found so far (see `init_worker_globals`), so they can abandon
    longer chains early.  The results are merged by length and then by word order, which
    gives the same chain as the serial search.

    Args:
        executor (ProcessPoolExecutor): Executor for managing worker processes.
        task_args (TaskArgs): Legal words and puzzle configuration.
        logf: File object to log the solving process.

    Returns:
        The solution chain if one is found, else None.
    """
    # Each legal word is a start word; duplicates would only repeat work
    start_words = list(dict.fromkeys(task_args.words))
    if not start_words:
        print("No start words found.", file=logf, flush=True)
        return None

    print(f"Starting parallel solver on {len(start_words)} start words...", file=logf, flush=True)

    futures = [executor.submit(_worker_task, word) for word in start_words]
    best: Chain | None = None
    for future in as_completed(futures):
        result = future.result()
        if result.status == "error":
            print(
                f"Worker for start word '{result.start_word}' encountered an error:",
                file=logf,
                flush=True,
            )
            print(result.err_msg, file=logf, flush=True)
            executor.shutdown(wait=False, cancel_futures=True)
            raise RuntimeError(f"Worker for start word '{result.start_word}' failed.")
        if result.status == "success" and result.result is not None:
            if best is None or (len(result.result), result.result) < (len(best), best):
                best = result.result
                print(
                    f"Start word '{result.start_word}': {len(best)}-word chain {best}",
                    file=logf,
                    flush=True,
                )

    if best is None:
        print("All start words processed, no solution found.", file=logf, flush=True)
    return best


@dataclass
class Result:
    """Wrapper for worker task results."""

    start_word: str
    status: Literal["success", "no_solution", "error"]
    result: Chain | None
    err_msg: str | None = None


def _worker_task(start_word: str) -> Result:
    """Worker task to search from a given start word.

    Args:
        start_word (str): The start word received from `executor.submit`.

    Returns:
        A Result wrapper.
    """
    try:
        ret = worker_task(start_word)
        return Result(
            start_word=start_word,
            status="success" if ret is not None else "no_solution",
            result=ret,
        )
    except Exception as e:
        return Result(
            start_word=start_word,
            status="error",
            result=None,
            err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
        )
