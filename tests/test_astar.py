from rltoolkit.astar import AStarPathfinder, find_path


def grid(w, h, fill=1):
    return [[fill] * h for _ in range(w)]


def walk(origin):
    cells = []
    cell = origin
    while cell is not None:
        cells.append(cell)
        cell = cell.child
    return cells


def assert_steps_valid(cells, diagonals):
    for a, b in zip(cells, cells[1:]):
        dx, dy = a.next_step_vector()
        assert (a.x + dx, a.y + dy) == (b.x, b.y)
        if diagonals:
            assert max(abs(dx), abs(dy)) == 1
        else:
            assert abs(dx) + abs(dy) == 1


def test_straight_corridor():
    origin = find_path(grid(5, 1), 0, 0, 4, 0)
    cells = walk(origin)
    assert origin.get_coords() == (0, 0)
    assert cells[-1].get_coords() == (4, 0)
    assert origin.total_path_length() == 4
    assert len(cells) == origin.total_path_length() + 1
    assert_steps_valid(cells, diagonals=False)
    assert cells[-1].next_step_vector() == (0, 0)


def test_open_field_orthogonal_path():
    pf = AStarPathfinder()
    origin = pf.find_path(grid(6, 6), 1, 1, 4, 5)
    cells = walk(origin)
    assert cells[-1].get_coords() == (4, 5)
    assert_steps_valid(cells, diagonals=False)
    assert origin.total_path_length() == len(cells) - 1


def test_diagonal_path():
    pf = AStarPathfinder(diagonal_move_allowed=True)
    origin = pf.find_path(grid(5, 5), 0, 0, 4, 4)
    cells = walk(origin)
    assert cells[-1].get_coords() == (4, 4)
    assert_steps_valid(cells, diagonals=True)
    assert origin.total_path_length() == len(cells) - 1


def test_path_avoids_walls():
    cost = grid(7, 7)
    for y in range(0, 6):
        cost[3][y] = -1
    origin = find_path(cost, 0, 0, 6, 0)
    cells = walk(origin)
    assert cells[-1].get_coords() == (6, 0)
    assert all(cost[c.x][c.y] >= 0 for c in cells)
    assert_steps_valid(cells, diagonals=False)


def wall_map():
    cost = grid(7, 5)
    for y in range(5):
        cost[3][y] = -1
    return cost


def test_blocked_target_gives_none():
    assert find_path(wall_map(), 0, 2, 6, 2) is None


def test_force_get_path_reaches_closest_cell():
    origin = find_path(wall_map(), 0, 2, 6, 2, force_get_path=True)
    cells = walk(origin)
    assert origin.get_coords() == (0, 2)
    assert cells[-1].get_coords() == (3 - 1, 2)
    assert_steps_valid(cells, diagonals=False)


def test_impassable_finish_needs_force_include():
    cost = grid(5, 5)
    cost[4][4] = -1
    assert find_path(cost, 0, 0, 4, 4) is None
    origin = find_path(cost, 0, 0, 4, 4, force_include_finish=True)
    cells = walk(origin)
    assert cells[-1].get_coords() == (4, 4)
    assert_steps_valid(cells, diagonals=False)


def test_module_function_matches_pathfinder():
    cost = grid(6, 4)
    cost[2][1] = -1
    a = walk(find_path(cost, 0, 0, 5, 3, diagonal_move_allowed=True))
    b = walk(AStarPathfinder(diagonal_move_allowed=True).find_path(cost, 0, 0, 5, 3))
    assert [c.get_coords() for c in a] == [c.get_coords() for c in b]