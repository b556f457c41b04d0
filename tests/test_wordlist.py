import pytest

from letterboxed.wordlist import create_word_map, load_word_list


def test_load_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("beg\n\n  Fij \nBEG\nace\n", encoding="utf-8")
    assert load_word_list(path) == ["BEG", "FIJ", "ACE"]


def test_load_word_list_uses_configured_path(tmp_path, monkeypatch):
    from letterboxed.solver.config import config as solver_config

    path = tmp_path / "dict.txt"
    path.write_text("lak\n", encoding="utf-8")
    monkeypatch.setattr(solver_config, "word_list_path", str(path))
    assert load_word_list() == ["LAK"]


def test_load_word_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(tmp_path / "missing.txt")


def test_create_word_map():
    word_map = create_word_map(["BEG", "FIJ", "BAD", "", "LAK"])
    assert word_map == {"B": ["BEG", "BAD"], "F": ["FIJ"], "L": ["LAK"]}
