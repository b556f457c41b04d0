import pytest

from letterboxed.solver.utils import (
    get_word_letters,
    int_comma,
    is_chained,
    letters_key,
    time_str,
    validate_solution,
)

from conftest import FOUR_WORD_CHAIN, TWO_WORD_CHAIN

LETTERS = frozenset("ABCDEFGHIJKL")


def test_word_letters():
    assert get_word_letters("LALA") == frozenset("AL")
    assert letters_key(get_word_letters("HCFIL")) == "CFHIL"


def test_is_chained():
    assert is_chained(FOUR_WORD_CHAIN)
    assert is_chained(["ADGJ"])
    assert not is_chained(["ADGJ", "HCFIL"])


def test_validate_solution():
    assert validate_solution(TWO_WORD_CHAIN, LETTERS, 6)
    assert validate_solution(FOUR_WORD_CHAIN, LETTERS, 4)


@pytest.mark.parametrize(
    "solution, max_guesses",
    [
        ([], 6),  # empty chain
        (FOUR_WORD_CHAIN, 3),  # too long
        (FOUR_WORD_CHAIN[:3], 6),  # missing K
        (["ADGJ", "JBEH", "HCFIL", "LAK", "KAX"], 6),  # extra letter X
        (["KCFIL", "ADGJBEHK"], 6),  # not chained
        (["ADGJBEHK", "KCFIL", "LAK", "KCFIL"], 6),  # repeated word
    ],
)
def test_validate_solution_rejects(solution, max_guesses):
    assert not validate_solution(solution, LETTERS, max_guesses)


def test_formatting():
    assert int_comma(1234567) == "1,234,567"
    assert time_str(3725.5) == "01:02:05.50"
