import pytest

from rltoolkit.fov_simple import bresenham_fov, two_step_fov


def never_opaque(x, y):
    return False


def wall_column(x, y):
    return x == 5


@pytest.mark.parametrize("fov", [bresenham_fov, two_step_fov])
def test_map_shape_and_origin_visible(fov):
    vis = fov(4, 3, 3, 9, 7, never_opaque)
    assert len(vis) == 9
    assert all(len(col) == 7 for col in vis)
    assert vis[4][3]


def test_bresenham_open_map_sees_exactly_its_square():
    fx, fy, r = 10, 10, 4
    vis = bresenham_fov(fx, fy, r, 20, 20, never_opaque)
    for x in range(20):
        for y in range(20):
            inside = fx - r <= x < fx + r and fy - r <= y < fy + r
            assert vis[x][y] == inside


@pytest.mark.parametrize("fov, radius", [(bresenham_fov, 5), (two_step_fov, 6)])
def test_wall_blocks_sight(fov, radius):
    vis = fov(2, 5, radius, 11, 11, wall_column)
    assert vis[5][5]
    assert not any(vis[x][y] for x in range(6, 11) for y in range(11))


def test_two_step_stays_within_radius():
    fx, fy, r = 10, 10, 4
    vis = two_step_fov(fx, fy, r, 20, 20, never_opaque)
    cells = {(x, y) for x in range(20) for y in range(20) if vis[x][y]}
    assert (fx, fy) in cells
    assert max(max(abs(x - fx), abs(y - fy)) for x, y in cells) <= r


def test_two_step_open_map_sees_neighbours():
    vis = two_step_fov(10, 10, 4, 20, 20, never_opaque)
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            assert vis[10 + dx][10 + dy]


def test_viewer_outside_map_does_not_fail():
    vis = bresenham_fov(-3, -3, 5, 6, 6, never_opaque)
    assert len(vis) == 6
    assert vis[0][0]
    assert not vis[5][5]


def test_two_step_negative_radius_rejected():
    with pytest.raises(ValueError):
        two_step_fov(2, 2, -1, 5, 5, never_opaque)