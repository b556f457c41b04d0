"""Puzzle configuration for a single solver run."""

from dataclasses import dataclass, field
from enum import IntEnum

from letterboxed.solver.config import config as solver_config

N_SIDES = 4
"""Number of sides of the letter box."""

LETTERS_PER_SIDE = 3
"""Number of letters on each side of the letter box."""

INVALID_GRID_MSG = "Invalid grid formation. Use `--help` to see the correct format."


class Side(IntEnum):
    """Enumeration for the sides of the letter box, in the order they appear in a grid string."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


class InvalidGridError(ValueError):
    """Raised when a grid does not describe four sides of three distinct letters each."""


def clean(grid_str: str) -> str:
    """Clean the grid string by removing whitespace and converting all letters to uppercase."""
    return "".join(grid_str.split()).upper()


@dataclass
class PuzzleConfig:
    """A puzzle configuration."""

    grid: str
    """The letter box as comma-separated sides, e.g. "ABC,DEF,GHI,JKL".

    Sides are listed in the order top, right, bottom, left.  The string is cleaned on
    construction (whitespace removed, letters uppercased).
    """

    max_guesses: int = field(default_factory=lambda: solver_config.max_guesses)
    """Maximum number of words allowed in a solution chain."""

    def __post_init__(self) -> None:
        """Normalize the grid and check the chain-length bound."""
        self.grid = clean(self.grid)
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be at least 1, got {self.max_guesses}.")

    def __str__(self) -> str:
        """Return a string representation of the Config."""
        return f"{self.grid} (max {self.max_guesses} words)"

    @property
    def sides(self) -> list[str]:
        """The comma-separated groups of the grid, in grid order."""
        return self.grid.split(",")

    def has_valid_shape(self) -> bool:
        """Check that the grid has the right number of comma-separated groups."""
        return len(self.sides) == N_SIDES

    def to_dict(self) -> dict:
        """Return a dictionary representation of the Config for serialization.

        This is useful for supplying the Config to child processes via
        `multiprocessing`, which requires arguments to be pickleable.
        """
        return {
            "grid": self.grid,
            "max_guesses": self.max_guesses,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PuzzleConfig":
        """Create a Config instance from a dictionary representation."""
        return cls(grid=data["grid"], max_guesses=data["max_guesses"])
