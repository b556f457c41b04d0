"""Utility functions for the Letter Boxed solver."""

from collections.abc import Collection, Sequence
from functools import lru_cache

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


@lru_cache(maxsize=300_000)
def get_word_letters(word: str) -> frozenset[str]:
    """Return a cached set of the letters in a word.

    This is the hotspot of state expansion: every successor unions the letters of one word.
    """
    return frozenset(word)


def letters_key(letters: Collection[str]) -> str:
    """Return the letters as a sorted string, used as the letter component of a search key."""
    return "".join(sorted(letters))


def is_chained(solution: Sequence[str]) -> bool:
    """Returns whether each word starts with the last letter of the word before it."""
    return all(prev[-1] == word[0] for prev, word in zip(solution, solution[1:]))


def validate_solution(
    solution: Sequence[str], all_letters: Collection[str], max_guesses: int
) -> bool:
    """Validate a solution chain independently of the search bookkeeping.

    Args:
        solution: The chain of words to check.
        all_letters: The letters of the board.
        max_guesses: Maximum number of words allowed in the chain.

    Returns:
        True if the chain is non-empty and within the length bound, has no repeated words, is
        chained head to tail, and uses exactly the letters of the board.
    """
    if not solution or len(solution) > max_guesses:
        return False
    if len(set(solution)) != len(solution):
        return False
    if not is_chained(solution):
        return False

    used_letters: set[str] = set()
    for word in solution:
        used_letters.update(word)
    return used_letters == set(all_letters)


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.sss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
