"""Module for word list management in Letter Boxed."""

from collections import defaultdict
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from letterboxed.solver.config import config as solver_config


def load_word_list(path: str | PathLike | None = None) -> list[str]:
    """Load the word list from the given file, or the configured dictionary file.

    Words are stripped and uppercased.  Blank lines are skipped, and repeated words keep only
    their first occurrence, so the original file order is preserved.

    Args:
        path: Path to a line-delimited word list.  Defaults to `word_list_path` in the
            solver config.

    Returns:
        A list of words, in file order.
    """
    word_list_path = Path(path if path is not None else solver_config.word_list_path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        words: dict[str, None] = {}
        for line in f:
            word = line.strip().upper()
            if not word:
                continue
            words.setdefault(word, None)
        return list(words)


def create_word_map(words: Iterable[str]) -> dict[str, list[str]]:
    """Create a mapping from first letter to the words starting with it.

    Words keep their relative order within each bucket.
    """
    word_map: defaultdict[str, list[str]] = defaultdict(list)

    for word in words:
        if word:
            word_map[word[0]].append(word)

    return dict(word_map)  # Convert defaultdict to regular dict for return
