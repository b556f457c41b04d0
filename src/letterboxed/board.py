"""Classes and functions for representing the letter box."""

from collections.abc import Iterable

import numpy as np

from letterboxed.puzzle_config import LETTERS_PER_SIDE, N_SIDES, Side, clean

ALPHABET_SIZE = 26

NO_SIDE = -1
"""Marker in the side index for letters that are not on the board."""

MIN_WORD_LENGTH = 3


def letter_idx(letter: str) -> int | None:
    """Return the 0-based alphabet position of an uppercase letter, or None if not in A-Z."""
    idx = ord(letter) - ord("A")
    if 0 <= idx < ALPHABET_SIZE:
        return idx
    return None


class Board:
    """Store the four sides of a letter box and the dictionary it is played against.

    Letters are mapped to their side through a 26-entry array indexed by alphabet position,
    so that classifying a word needs one array lookup per letter.
    """

    def __init__(self, grid: str, dictionary: Iterable[str] = ()) -> None:
        groups = clean(grid).split(",")
        self.n_groups = len(groups)

        self.sides: dict[Side, tuple[str, ...]] = {}
        letters: set[str] = set()
        for side, group in zip(Side, groups):
            self.sides[side] = tuple(group)
            letters.update(group)
        self.all_letters = frozenset(letters)

        self.dictionary = tuple(word.strip().upper() for word in dictionary)

        self.side_index = np.full(ALPHABET_SIZE, NO_SIDE, dtype=np.int8)
        for side, side_letters in self.sides.items():
            for ch in side_letters:
                idx = letter_idx(ch)
                if idx is not None:
                    self.side_index[idx] = side

    def __str__(self) -> str:
        """Returns the grid string of the board."""
        return ",".join("".join(letters) for letters in self.sides.values())

    def print(self) -> None:
        """Print the board to the console as a square, top side first."""
        top, right, bottom, left = (self.sides.get(side, ()) for side in Side)
        width = 2 * LETTERS_PER_SIDE + 1
        print("  " + " ".join(top).center(width))
        for row in range(LETTERS_PER_SIDE):
            left_ch = left[row] if row < len(left) else " "
            right_ch = right[row] if row < len(right) else " "
            print(f"{left_ch} " + " " * width + f" {right_ch}")
        print("  " + " ".join(bottom).center(width))

    def is_valid(self) -> bool:
        """Check for four sides of three letters each, with twelve distinct letters A-Z."""
        return (
            self.n_groups == N_SIDES
            and all(len(letters) == LETTERS_PER_SIDE for letters in self.sides.values())
            and all(letter_idx(ch) is not None for ch in self.all_letters)
            and len(self.all_letters) == N_SIDES * LETTERS_PER_SIDE
        )

    def get_side(self, letter: str) -> Side | None:
        """Return the side holding the given letter, or None if it is not on the board."""
        idx = letter_idx(letter.upper())
        if idx is None:
            return None
        side = int(self.side_index[idx])
        return None if side == NO_SIDE else Side(side)

    def is_valid_word(self, word: str) -> bool:
        """Check whether a word can be played on this board.

        Words must be at least three letters long, use only letters on the board, and never
        take two consecutive letters from the same side.
        """
        word = word.upper()
        if len(word) < MIN_WORD_LENGTH:
            return False

        last_side = None
        for letter in word:
            side = self.get_side(letter)
            if side is None or side == last_side:
                return False
            last_side = side
        return True

    def generate_words(self) -> list[str]:
        """Return the dictionary words playable on this board, in dictionary order."""
        return [word for word in self.dictionary if self.is_valid_word(word)]
