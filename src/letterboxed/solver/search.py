"""Best-first search for word chains covering every letter of the board."""

from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from multiprocessing.sharedctypes import Synchronized
from time import time
from typing import NamedTuple, TextIO

from sortedcontainers import SortedList

from letterboxed.solver.config import config as solver_config
from letterboxed.solver.utils import get_word_letters, int_comma, letters_key, time_str
from letterboxed.wordlist import create_word_map

Chain = tuple[str, ...]


class SearchState(NamedTuple):
    """A node of the search: a chain of words and the letters it uses.

    States compare as plain tuples, so the frontier pops the shortest chains first, then the
    smallest sorted letter strings, then the smallest chains in word order.
    """

    count: int
    """Number of words in the chain."""

    letters: str
    """Sorted string of the distinct letters used by the chain."""

    chain: Chain
    """The words played so far, in order."""


@dataclass
class SearchStats:
    """Counters kept while searching, used for progress reports."""

    start_time: float = field(default_factory=time)
    states_popped: int = 0
    states_pushed: int = 0


def initial_states(words: Iterable[str]) -> list[SearchState]:
    """One-word chains for each of the given start words."""
    return [SearchState(1, letters_key(get_word_letters(w)), (w,)) for w in words]


def expand(state: SearchState, word_map: Mapping[str, Sequence[str]]) -> list[SearchState]:
    """Return the successors of a state.

    A successor appends a word that starts with the last letter of the chain and is not
    already in the chain.
    """
    used = set(state.letters)
    successors = []
    for word in word_map.get(state.chain[-1][-1], ()):
        if word in state.chain:
            continue
        successors.append(
            SearchState(
                state.count + 1,
                letters_key(used | get_word_letters(word)),
                state.chain + (word,),
            )
        )
    return successors


def search(
    words: Sequence[str],
    all_letters: Collection[str],
    *,
    max_guesses: int,
    word_map: Mapping[str, Sequence[str]] | None = None,
    start_words: Iterable[str] | None = None,
    best_len: Synchronized | None = None,
    stats: SearchStats | None = None,
    logf: TextIO | None = None,
) -> Chain | None:
    """Find the shortest chain of words that uses every letter of the board.

    Among chains of the shortest length, the smallest in word order is returned.

    Args:
        words: Legal words for the board.
        all_letters: The letters of the board.
        max_guesses: Maximum number of words in a chain.  Chains of this length are not
            expanded further.
        word_map: Precomputed first-letter index of `words`.  Built from `words` if None.
        start_words: Words the chain may start with.  Defaults to all of `words`.
        best_len: Shared bound on the chain length, lowered when a solution is found.  States
            longer than the bound are abandoned; states of equal length are still explored.
        stats: Counters to update.  A fresh SearchStats is used if None.
        logf: File object for progress reports, or None to stay quiet.

    Returns:
        The solution chain, or None if no chain within `max_guesses` words covers the board.
    """
    if word_map is None:
        word_map = create_word_map(words)
    if stats is None:
        stats = SearchStats()
    target = letters_key(all_letters)

    frontier = SortedList(initial_states(words if start_words is None else start_words))
    stats.states_pushed += len(frontier)

    while frontier:
        state = frontier.pop(0)
        stats.states_popped += 1
        if logf is not None and stats.states_popped % solver_config.report_interval == 0:
            print(
                f"[{time_str(time() - stats.start_time)}] "
                f"explored {int_comma(stats.states_popped)} states, "
                f"frontier {int_comma(len(frontier))}, chain length {state.count}",
                file=logf,
                flush=True,
            )

        limit = max_guesses
        if best_len is not None:
            bound = best_len.value
            if state.count > bound:
                # A shorter chain was found elsewhere; nothing left here can beat it
                return None
            limit = min(limit, bound)

        if state.letters == target:
            if best_len is not None:
                with best_len.get_lock():
                    best_len.value = min(best_len.value, state.count)
            return state.chain

        if state.count >= limit:
            continue

        successors = expand(state, word_map)
        frontier.update(successors)
        stats.states_pushed += len(successors)

    return None
