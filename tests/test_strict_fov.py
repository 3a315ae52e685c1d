import pytest

from rltoolkit.strict_fov import strict_definition_fov


def _open(x, y):
    return False


def _visible_cells(vis):
    return {(x, y) for x, column in enumerate(vis) for y, v in enumerate(column) if v}


def test_dimensions_follow_map_size():
    vis = strict_definition_fov(1, 1, 3, 6, 8, _open)
    assert len(vis) == 6
    assert all(len(column) == 8 for column in vis)


def test_zero_radius_shows_only_origin():
    vis = strict_definition_fov(4, 4, 0, 9, 9, _open)
    assert _visible_cells(vis) == {(4, 4)}


@pytest.mark.parametrize("radius", [1, 2, 5])
def test_open_map_visible_set_is_the_disc(radius):
    size = 2 * radius + 7
    c = size // 2
    vis = strict_definition_fov(c, c, radius, size, size, _open)
    r = radius + 1
    expected = {
        (x, y)
        for x in range(size)
        for y in range(size)
        if (x - c) ** 2 + (y - c) ** 2 < r * r
    }
    assert _visible_cells(vis) == expected


def test_full_wall_blocks_everything_behind_it():
    def wall(x, y):
        return x == 7

    vis = strict_definition_fov(5, 5, 6, 15, 11, wall)
    assert vis[7][5] is True
    assert vis[6][5] is True
    assert not any(vis[x][y] for x in range(8, 15) for y in range(11))


def test_pillar_hides_cell_directly_behind():
    def pillar(x, y):
        return (x, y) == (6, 5)

    vis = strict_definition_fov(5, 5, 5, 13, 11, pillar)
    assert vis[6][5] is True
    assert vis[7][5] is False
    assert vis[5][8] is True


def test_visible_cells_stay_inside_radius():
    def checker(x, y):
        return (x + y) % 5 == 0

    c, radius = 8, 5
    vis = strict_definition_fov(c, c, radius, 17, 17, checker)
    r = radius + 1
    assert all((x - c) ** 2 + (y - c) ** 2 < r * r for x, y in _visible_cells(vis))


def test_viewer_near_edge_clips_to_map():
    vis = strict_definition_fov(0, 0, 3, 5, 5, _open)
    cells = _visible_cells(vis)
    assert (0, 0) in cells
    assert all(0 <= x < 5 and 0 <= y < 5 for x, y in cells)
    assert (4, 4) not in cells