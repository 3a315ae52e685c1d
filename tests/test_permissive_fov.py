import pytest

from rltoolkit.geometry import are_coords_in_range
from rltoolkit.permissive_fov import permissive_fov


def _open(x, y):
    return False


def _visible_cells(vis):
    return {(x, y) for x, column in enumerate(vis) for y, seen in enumerate(column) if seen}


def test_result_dimensions():
    vis = permissive_fov(2, 3, 4, 7, 5, _open)
    assert len(vis) == 7
    assert all(len(column) == 5 for column in vis)


def test_origin_and_orthogonal_neighbours_visible_on_open_map():
    vis = permissive_fov(4, 4, 3, 9, 9, _open)
    for x, y in [(4, 4), (3, 4), (5, 4), (4, 3), (4, 5)]:
        assert vis[x][y]


@pytest.mark.parametrize("radius", [2, 3, 4])
def test_visible_cells_are_within_range(radius):
    vis = permissive_fov(5, 5, radius, 11, 11, _open)
    cells = _visible_cells(vis)
    assert cells
    assert all(are_coords_in_range(x - 5, y - 5, 0, 0, radius) for x, y in cells)


def test_open_map_is_mirror_symmetric():
    vis = permissive_fov(4, 4, 3, 9, 9, _open)
    for x in range(9):
        for y in range(9):
            assert vis[x][y] == vis[8 - x][y]
            assert vis[x][y] == vis[x][8 - y]


def test_wall_column_blocks_sight():
    def opaque(x, y):
        return x == 4

    vis = permissive_fov(1, 3, 10, 7, 7, opaque)
    assert vis[4][3]
    assert vis[3][3]
    assert not any(vis[x][y] for x in range(5, 7) for y in range(7))


def test_enclosed_viewer_sees_only_surroundings():
    walls = {(4 + dx, 4 + dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)} - {(4, 4)}

    def opaque(x, y):
        return (x, y) in walls

    vis = permissive_fov(4, 4, 5, 9, 9, opaque)
    cells = _visible_cells(vis)
    assert cells <= walls | {(4, 4)}
    assert {(4, 4), (3, 4), (5, 4), (4, 3), (4, 5)} <= cells


def test_larger_radius_sees_at_least_as_much():
    def opaque(x, y):
        return (x, y) in {(6, 6), (3, 7), (8, 2)}

    small = _visible_cells(permissive_fov(5, 5, 2, 11, 11, opaque))
    large = _visible_cells(permissive_fov(5, 5, 4, 11, 11, opaque))
    assert small <= large