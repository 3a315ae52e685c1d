"""A* pathfinding over an integer cost map indexed as cost_map[x][y]."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

DIAGONAL_COST = 14
STRAIGHT_COST = 10
HEURISTIC_MULTIPLIER = 10
DEFAULT_PATHFINDING_STEPS = 175

CostMap = Sequence[Sequence[int]]


@dataclass(eq=False)
class Cell:
    """A node of a found path; follow ``child`` from the origin to walk it."""

    x: int
    y: int
    g: int = 0
    h: int = 0
    parent: Optional[Cell] = field(default=None, repr=False)
    child: Optional[Cell] = field(default=None, repr=False)
    num_childs: int = 0

    @property
    def f(self) -> int:
        return self.g + self.h

    def get_coords(self) -> tuple[int, int]:
        return self.x, self.y

    def next_step_vector(self) -> tuple[int, int]:
        """Return the step towards the next cell of the path, or (0, 0) at its end."""
        if self.child is None:
            return 0, 0
        return self.child.x - self.x, self.child.y - self.y

    def total_path_length(self) -> int:
        """Number of steps from this cell to the end of the path."""
        return self.num_childs

    def _set_g(self, inc: int) -> None:
        if self.parent is not None:
            self.g = self.parent.g + inc

    def _link_path(self) -> None:
        """Link children along the parent chain ending at this cell."""
        current = self
        current.num_childs = 0
        while current.parent is not None:
            current.parent.child = current
            current.parent.num_childs = current.num_childs + 1
            current = current.parent


def _heuristic(from_x: int, from_y: int, to_x: int, to_y: int, diagonals: bool) -> int:
    if diagonals:
        return (from_x - to_x) ** 2 + (from_y - to_y) ** 2
    return HEURISTIC_MULTIPLIER * (abs(to_x - from_x) + abs(to_y - from_y))


def _in_map(x: int, y: int, cost_map: CostMap) -> bool:
    return 0 <= x < len(cost_map) and 0 <= y < len(cost_map[0])


@dataclass
class AStarPathfinder:
    """A* search; negative costs mark impassable cells."""

    diagonal_move_allowed: bool = False
    force_get_path: bool = False
    force_include_finish: bool = False
    auto_adjust_default_max_steps: bool = False

    def find_path(
        self, cost_map: CostMap, from_x: int, from_y: int, to_x: int, to_y: int
    ) -> Optional[Cell]:
        """Return the origin cell of the found path, or None when there is none.

        With ``force_get_path`` a path to the closest reachable cell is returned instead.
        """
        total_cells = len(cost_map) * len(cost_map[0])
        max_depth = DEFAULT_PATHFINDING_STEPS
        if total_cells > DEFAULT_PATHFINDING_STEPS and self.auto_adjust_default_max_steps:
            max_depth = total_cells

        origin = Cell(
            from_x, from_y, h=_heuristic(from_x, from_y, to_x, to_y, self.diagonal_move_allowed)
        )
        open_list: list[Cell] = [origin]
        open_index: dict[tuple[int, int], Cell] = {(from_x, from_y): origin}
        closed: dict[tuple[int, int], Cell] = {}
        steps = 0

        while True:
            current_index = min(range(len(open_list)), key=lambda i: open_list[i].f)
            current = open_list.pop(current_index)
            del open_index[(current.x, current.y)]
            closed.setdefault((current.x, current.y), current)

            target = self._analyze_neighbors(
                current, open_list, open_index, closed, cost_map, to_x, to_y
            )
            steps += 1
            if target is not None:
                target._link_path()
                return origin
            if not open_list or steps > max_depth:
                if self.force_get_path:
                    closest = min(closed.values(), key=lambda c: c.h)
                    closest._link_path()
                    return origin
                return None

    def _analyze_neighbors(
        self,
        current: Cell,
        open_list: list[Cell],
        open_index: dict[tuple[int, int], Cell],
        closed: dict[tuple[int, int], Cell],
        cost_map: CostMap,
        to_x: int,
        to_y: int,
    ) -> Optional[Cell]:
        for i in (-1, 0, 1):
            for j in (-1, 0, 1):
                if (i == 0 and j == 0) or (not self.diagonal_move_allowed and i != 0 and j != 0):
                    continue
                x, y = current.x + i, current.y + j
                if not _in_map(x, y, cost_map):
                    continue
                is_finish = x == to_x and y == to_y
                if cost_map[x][y] < 0 or (x, y) in closed:
                    if not (self.force_include_finish and is_finish):
                        continue
                unit = DIAGONAL_COST if i * j != 0 else STRAIGHT_COST
                cost = unit * cost_map[x][y]
                neighbor = open_index.get((x, y))
                if neighbor is not None:
                    if neighbor.g > current.g + cost:
                        neighbor.parent = current
                        neighbor._set_g(cost)
                    continue
                neighbor = Cell(
                    x, y, parent=current,
                    h=_heuristic(x, y, to_x, to_y, self.diagonal_move_allowed),
                )
                if is_finish:
                    return neighbor
                neighbor._set_g(cost)
                open_list.append(neighbor)
                open_index[(x, y)] = neighbor
        return None


def find_path(
    cost_map: CostMap,
    from_x: int,
    from_y: int,
    to_x: int,
    to_y: int,
    diagonal_move_allowed: bool = False,
    force_get_path: bool = False,
    force_include_finish: bool = False,
) -> Optional[Cell]:
    """Find a path with a pathfinder configured from the flags."""
    pathfinder = AStarPathfinder(
        diagonal_move_allowed=diagonal_move_allowed,
        force_get_path=force_get_path,
        force_include_finish=force_include_finish,
    )
    return pathfinder.find_path(cost_map, from_x, from_y, to_x, to_y)