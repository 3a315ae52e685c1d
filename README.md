# rltoolkit

Building blocks for roguelike games. It is pure Python and needs only the standard library.

## Contents

- `rltoolkit.lcg_random` provides `LCGRandom`, a linear congruential generator with `random`, `rand_in_range` (inclusive), `roll_dice`, `random_percent`, `random_unit_vector_int` and `random_coords_in_range_from`. The module also has functions of the same names that share one module-level generator, along with `set_seed` and `randomize`, which seeds from the clock. `Dice(dnum, dval, dmod=0).roll(prng)` rolls through any object that has a `roll_dice` method.
- `rltoolkit.fib_random` provides `FibRandom(seed=-1, lag_a=17, lag_b=5)`, a lagged Fibonacci generator. A negative seed seeds it from the clock. Besides the usual helpers it offers `one_chance_from`, `biased_rand_in_range` and `select_random_index_from_weighted`. Lags that are not positive and distinct raise `ValueError`.
- `rltoolkit.geometry` holds cell-space checks:
  - `are_coords_in_rect`
  - `are_coords_in_range`, which uses a slightly wider circle that suits grids
  - `are_coords_in_range_from_rect`
  - `are_rects_in_range`
  - `are_two_cell_rects_overlapping`
  - `get_cell_nearest_to_rect_from`
  - `are_coords_in_sector`, which takes an angle in degrees
- `rltoolkit.primitives` rasterises shapes into lists of `Point(x, y)`:
  - `get_line`, a Bresenham line that includes both ends
  - `get_line_over`, a line of fixed length that runs past its target
  - `get_circle`
  - `get_approx_circle_around_rect`

  A negative radius raises `ValueError`.
- `rltoolkit.string_ops` holds `reverse_string`, `rotated_strings` and `mirrored_strings`, which work on lists of equal-length rows.
- `rltoolkit.vectors` holds a mutable float `Vector` with `from_points`, `add`, `rotate`, `rounded_coords`, `unit_vector` and `normalize`. It also has `rotate_int_coords_90`, `rotate_int_coords_45` and `random_vector_between`.
- `rltoolkit.search` has `find_closest_coords(condition, x, y, max_dist)`, which searches in rings outward from the start. `find_closest_coords_naive` does the same search by a full scan. Both return `(x, y)` or `None`.
- `rltoolkit.astar` provides A* over a cost map indexed `cost_map[x][y]`. A negative cost marks a cell that cannot be entered. Use `AStarPathfinder(diagonal_move_allowed, force_get_path, force_include_finish, auto_adjust_default_max_steps).find_path(...)` or the function `find_path`.
  - The result is the origin `Cell` of the path, or `None`.
  - Walk the path through `cell.child`, or ask `cell.next_step_vector()` and `cell.total_path_length()`.
  - Without `auto_adjust_default_max_steps`, the search stops after 175 steps.
- Field of view: each function returns a grid of booleans indexed `[x][y]`. Each takes `(from_x, from_y, radius, map_w, map_h, opaque)`, where `opaque(x, y)` returns a bool.
  - `rltoolkit.fov_simple.bresenham_fov` and `rltoolkit.fov_simple.two_step_fov` cast simple rays.
  - `rltoolkit.mill_fov.mill_fov` treats walls as bevelled.
  - `rltoolkit.strict_fov.strict_definition_fov` casts lines of sight under a strict rule.
  - `rltoolkit.permissive_fov.permissive_fov` computes precise permissive view. A negative radius means no range limit.
- Map generation:
  - `rltoolkit.ca_cave.make_cave(w, h, wall_percent, smoothness, seed)` builds a cellular-automaton cave. It returns `w` strings of length `h` made of `#` and `.`. A negative seed seeds it from the clock.
  - `rltoolkit.fractal_landscape.gen_height_map(w, h, rng=None)` builds a midpoint-displacement height map. Even dimensions are enlarged by one.
  - `rltoolkit.rbr.RBR(width, height, sec_areas=1, vaults_path=None, roomvaults_path=None, seed=-1)` generates a dungeon room by room with `generate()`. It is built on `rltoolkit.rbr_map.RBRMap`, and you read the result through `tile_at(x, y)` or `map_chars()`.
    - Each `Tile` has a `tile_type` (a `TileType`), a `room_id` and a `sec_area`.
    - Doors between security areas are shown by the digit of their area.
    - `GenerationError` is raised if no entrance stair can be placed.
- `rltoolkit.vault` holds `Vault` and `read_vaults(path)`. `read_vaults` reads vault files, where vaults are separated by blank lines or by lines containing `//`. The symbols `#`, `.` and `+` become wall, floor and door, and a space leaves the map untouched.

## Examples

```python
from rltoolkit.astar import AStarPathfinder

cost_map = [[1] * 10 for _ in range(10)]
finder = AStarPathfinder(diagonal_move_allowed=True)
start = finder.find_path(cost_map, 0, 0, 7, 5)
if start is not None:
    print(start.next_step_vector(), start.total_path_length())
```

```python
from rltoolkit.mill_fov import mill_fov

rows = ["#####", "#...#", "#...#", "#####"]
visible = mill_fov(2, 1, 5, len(rows), len(rows[0]), lambda x, y: rows[x][y] == "#")
```

```python
from rltoolkit.ca_cave import make_cave
from rltoolkit.rbr import RBR

cave = make_cave(80, 25, 40, 4, 12345)

gen = RBR(80, 25, sec_areas=3, seed=42)
gen.generate()
for column in gen.map_chars():
    print("".join(column))
```

## What it does not do

This is a library only. It draws nothing, opens no terminal or window, and reads no keyboard or mouse input, so there are no menus or screens. Rendering maps and handling input are left to the game that uses it. It has no command-line program.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```