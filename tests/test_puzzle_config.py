import pytest

from letterboxed.puzzle_config import PuzzleConfig, Side, clean


def test_clean_strips_whitespace_and_uppercases():
    assert clean(" abc, Def,\tghi ,jkl\n") == "ABC,DEF,GHI,JKL"


def test_sides_follow_grid_order():
    assert [side.name for side in Side] == ["TOP", "RIGHT", "BOTTOM", "LEFT"]


def test_config_is_cleaned():
    config = PuzzleConfig(grid="abc, def, ghi, jkl", max_guesses=3)
    assert config.grid == "ABC,DEF,GHI,JKL"
    assert config.sides == ["ABC", "DEF", "GHI", "JKL"]
    assert str(config) == "ABC,DEF,GHI,JKL (max 3 words)"


@pytest.mark.parametrize(
    "grid, expected",
    [
        ("abc,def,ghi,jkl", True),
        ("abc,def,ghi", False),
        ("abc,def,ghi,jkl,mno", False),
        # Shape only counts groups; letters are checked by the board
        ("ab,def,ghi,jkl", True),
    ],
)
def test_has_valid_shape(grid, expected):
    assert PuzzleConfig(grid=grid).has_valid_shape() is expected


def test_default_max_guesses():
    assert PuzzleConfig(grid="abc,def,ghi,jkl").max_guesses == 6


def test_max_guesses_must_be_positive():
    with pytest.raises(ValueError):
        PuzzleConfig(grid="abc,def,ghi,jkl", max_guesses=0)


def test_dict_round_trip():
    config = PuzzleConfig(grid="abc,def,ghi,jkl", max_guesses=4)
    assert config.to_dict() == {"grid": "ABC,DEF,GHI,JKL", "max_guesses": 4}
    assert PuzzleConfig.from_dict(config.to_dict()) == config
