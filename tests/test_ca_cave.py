import pytest

from rltoolkit.ca_cave import make_cave


def test_shape_and_characters():
    cave = make_cave(30, 20, 40, 3, 7)
    assert len(cave) == 30
    assert all(len(column) == 20 for column in cave)
    assert set("".join(cave)) <= {"#", "."}


def test_same_seed_gives_same_cave():
    first = make_cave(25, 15, 45, 4, 123)
    second = make_cave(25, 15, 45, 4, 123)
    assert len(first) == 25
    assert all(len(column) == 15 for column in first)
    assert set("".join(first)) <= {"#", "."}
    assert first == second


def test_full_walls_away_from_floor_band_stay_walls():
    assert make_cave(5, 20, 100, 3, 1) == ["#" * 20] * 5


def test_zero_walls_does_not_depend_on_seed():
    assert make_cave(20, 12, 0, 3, 1) == make_cave(20, 12, 0, 3, 99)


def test_smoothness_below_one_acts_as_one():
    assert make_cave(18, 14, 40, 0, 5) == make_cave(18, 14, 40, 1, 5)


def test_negative_seed_randomizes():
    cave = make_cave(12, 10, 40, 2, -1)
    assert len(cave) == 12
    assert all(len(column) == 10 for column in cave)


def test_zero_width_rejected():
    with pytest.raises(ValueError):
        make_cave(0, 10, 40, 2, 1)