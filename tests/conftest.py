"""Shared fixtures for the Letter Boxed tests."""

import pytest

from letterboxed.solver.config import config as solver_config

GRID = "abc,def,ghi,jkl"
"""Top ABC, right DEF, bottom GHI, left JKL."""

FOUR_WORD_CHAIN = ["ADGJ", "JBEH", "HCFIL", "LAK"]
"""The only covering chain over these words; it needs all four."""

TWO_WORD_CHAIN = ["ADGJBEHK", "KCFIL"]


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Send per-run log files to a temporary directory."""
    path = tmp_path / "logs"
    monkeypatch.setattr(solver_config, "log_dir", str(path))
    return path


@pytest.fixture
def word_file(tmp_path):
    """A word list file with a two-word solution for GRID, plus noise."""
    path = tmp_path / "words.txt"
    path.write_text(
        "\n".join(["beg", "ace", "xyz", *FOUR_WORD_CHAIN, *TWO_WORD_CHAIN, "kfcil"]) + "\n",
        encoding="utf-8",
    )
    return path
