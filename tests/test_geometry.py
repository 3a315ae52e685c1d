import pytest

from rltoolkit.geometry import (
    are_coords_in_range,
    are_coords_in_range_from_rect,
    are_coords_in_rect,
    are_coords_in_sector,
    are_rects_in_range,
    are_two_cell_rects_overlapping,
    get_cell_nearest_to_rect_from,
)


def test_coords_in_rect_edges():
    assert are_coords_in_rect(2, 3, 2, 3, 4, 5)
    assert are_coords_in_rect(5, 7, 2, 3, 4, 5)
    assert not are_coords_in_rect(6, 3, 2, 3, 4, 5)
    assert not are_coords_in_rect(2, 8, 2, 3, 4, 5)
    assert not are_coords_in_rect(1, 3, 2, 3, 4, 5)


@pytest.mark.parametrize("fx,fy,tx,ty,r", [(0, 0, 3, 4, 5), (1, 1, -2, 5, 3), (7, 2, 7, 9, 6)])
def test_range_is_symmetric(fx, fy, tx, ty, r):
    assert are_coords_in_range(fx, fy, tx, ty, r) == are_coords_in_range(tx, ty, fx, fy, r)


def test_range_border_included_and_far_excluded():
    assert are_coords_in_range(0, 0, 5, 0, 5)
    assert not are_coords_in_range(0, 0, 7, 0, 5)


def test_range_monotonic_in_radius():
    for r in range(1, 10):
        for d in range(0, 15):
            if are_coords_in_range(0, 0, d, d // 2, r):
                assert are_coords_in_range(0, 0, d, d // 2, r + 1)


def test_rects_overlapping_cells():
    assert not are_two_cell_rects_overlapping(0, 0, 1, 1, 1, 0, 1, 1)
    assert are_two_cell_rects_overlapping(0, 0, 2, 1, 1, 0, 1, 1)
    assert are_two_cell_rects_overlapping(0, 0, 10, 10, 3, 3, 2, 2)


def test_rect_overlap_symmetric():
    cases = [(0, 0, 3, 3, 2, 2, 3, 3), (0, 0, 3, 3, 3, 0, 1, 1), (5, 5, 1, 1, 0, 0, 5, 5)]
    for a in cases:
        assert are_two_cell_rects_overlapping(*a) == are_two_cell_rects_overlapping(*a[4:], *a[:4])


def test_intersecting_rects_always_in_range():
    assert are_rects_in_range(0, 0, 5, 5, 2, 2, 5, 5, 0)


def test_rects_in_range_side_gap():
    # rect B starts three columns right of rect A's last column
    assert are_rects_in_range(0, 0, 2, 2, 4, 0, 2, 2, 3)
    assert not are_rects_in_range(0, 0, 2, 2, 4, 0, 2, 2, 2)


def test_rects_in_range_symmetric():
    for r in range(0, 6):
        assert are_rects_in_range(0, 0, 2, 3, 6, 7, 2, 2, r) == are_rects_in_range(6, 7, 2, 2, 0, 0, 2, 3, r)


def test_range_from_rect_matches_single_cell_point():
    for r in range(0, 6):
        assert are_coords_in_range_from_rect(0, 0, 3, 4, 1, 1, r) == are_coords_in_range(0, 0, 3, 4, r)


def test_nearest_cell_inside_returns_same():
    assert get_cell_nearest_to_rect_from(0, 0, 5, 5, 2, 3) == (2, 3)


def test_nearest_cell_top_left_corner():
    assert get_cell_nearest_to_rect_from(10, 10, 4, 4, 0, 0) == (9, 9)


@pytest.mark.parametrize("fx,fy", [(-5, -5), (-5, 12), (20, 12), (20, -5), (-5, 8), (20, 9), (11, 30), (12, -3)])
def test_nearest_cell_is_adjacent_outside(fx, fy):
    rx, ry, w, h = 10, 7, 4, 3
    cx, cy = get_cell_nearest_to_rect_from(rx, ry, w, h, fx, fy)
    assert not are_coords_in_rect(cx, cy, rx, ry, w, h)
    assert are_coords_in_rect(cx, cy, rx - 1, ry - 1, w + 2, h + 2)


def test_sector_origin_always_inside():
    assert are_coords_in_sector(4, 4, 4, 4, 1, 0, 1)


def test_sector_full_circle():
    assert all(are_coords_in_sector(x, y, 0, 0, 0, 1, 360) for x in range(-3, 4) for y in range(-3, 4))


def test_sector_facing_direction():
    assert are_coords_in_sector(5, 0, 0, 0, 1, 0, 90)
    assert not are_coords_in_sector(-5, 0, 0, 0, 1, 0, 90)
    assert not are_coords_in_sector(0, 5, 0, 0, 1, 0, 90)


@pytest.mark.parametrize("angle", [200, 250, 300, 359])
def test_sector_reflex_is_complement(angle):
    for x in range(-4, 5):
        for y in range(-4, 5):
            if (x, y) == (0, 0):
                continue
            assert are_coords_in_sector(x, y, 0, 0, 1, 1, angle) == (
                not are_coords_in_sector(x, y, 0, 0, -1, -1, 360 - angle)
            )