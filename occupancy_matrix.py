from dataclasses import dataclass
from enum import Enum

import numpy as np


EMPTY = -1
PIVOT = -2


class InvalidLayout(ValueError):
    pass


class MergeOrientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class DockMergePolicy:
    orientation: MergeOrientation
    all_items_rank: int
    include_all_items: bool = False


class OccupancyMatrix:
    """Slot indices laid out on a (column, row) grid; EMPTY where nothing sits."""

    def __init__(self, count_x: int, count_y: int):
        _check_dimensions(count_x, count_y)
        self.cells = np.full((count_x, count_y), EMPTY, dtype=np.int64)

    @property
    def count_x(self) -> int:
        return self.cells.shape[0]

    @property
    def count_y(self) -> int:
        return self.cells.shape[1]

    def __getitem__(self, pos):
        x, y = pos
        return int(self.cells[x, y])

    def __setitem__(self, pos, value):
        x, y = pos
        self.cells[x, y] = value

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.count_x and 0 <= y < self.count_y

    def is_occupied(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.cells[x, y] >= 0

    def occupied_indices(self) -> list[int]:
        values = self.cells[self.cells >= 0]
        return sorted(int(v) for v in values)

    def find_cell(self, index: int) -> tuple[int, int] | None:
        hits = np.argwhere(self.cells == index)
        if len(hits) == 0:
            return None
        x, y = hits[0]
        return int(x), int(y)

    def rows(self) -> list[list[int]]:
        return self.cells.T.tolist()

    def __repr__(self):
        body = "\n".join(
            " ".join(f"{v:3d}" for v in row) for row in self.rows()
        )
        return f"OccupancyMatrix({self.count_x}x{self.count_y})\n{body}"


def _check_dimensions(count_x, count_y):
    if count_x <= 0 or count_y <= 0:
        raise InvalidLayout(f"grid dimensions must be positive, got {count_x}x{count_y}")


def _place(matrix: OccupancyMatrix, x: int, y: int, index: int):
    if not matrix.in_bounds(x, y):
        raise InvalidLayout(
            f"slot {index} at ({x}, {y}) is outside a {matrix.count_x}x{matrix.count_y} grid"
        )
    if matrix[x, y] != EMPTY:
        raise InvalidLayout(f"slots {matrix[x, y]} and {index} both claim cell ({x}, {y})")
    matrix[x, y] = index


def _reading_order(index: int, count_x: int) -> tuple[int, int]:
    return index % count_x, index // count_x


def build_sparse(container) -> OccupancyMatrix:
    matrix = OccupancyMatrix(container.count_x, container.count_y)
    for i in range(container.child_count()):
        x, y = container.position_of(container.child_at(i))
        _place(matrix, x, y, i)
    return matrix


def build_full(container) -> OccupancyMatrix:
    count_x, count_y = container.count_x, container.count_y
    matrix = OccupancyMatrix(count_x, count_y)
    total = container.child_count()
    if total > count_x * count_y:
        raise InvalidLayout(f"{total} children do not fit a {count_x}x{count_y} page")
    for i in range(total):
        x, y = _reading_order(i, count_x)
        matrix[x, y] = i
    return matrix


def build_merged(primary, dock, policy: DockMergePolicy) -> OccupancyMatrix:
    """Grid cells followed by the dock strip on the edge the policy names.

    Dock slots are numbered after the grid's children so that any index
    >= primary.child_count() belongs to the dock.
    """
    px, py = primary.count_x, primary.count_y
    dx, dy = dock.count_x, dock.count_y
    _check_dimensions(px, py)
    _check_dimensions(dx, dy)
    horizontal = policy.orientation is MergeOrientation.HORIZONTAL
    if horizontal:
        matrix = OccupancyMatrix(max(px, dx), py + dy)
    else:
        matrix = OccupancyMatrix(px + dx, max(py, dy))

    for i in range(primary.child_count()):
        x, y = primary.position_of(primary.child_at(i))
        if not (0 <= x < px and 0 <= y < py):
            raise InvalidLayout(f"slot {i} at ({x}, {y}) is outside a {px}x{py} grid")
        _place(matrix, x, y, i)

    offset = primary.child_count()
    for i in range(dock.child_count()):
        x, y = dock.position_of(dock.child_at(i))
        rank = x if horizontal else y
        if rank == policy.all_items_rank and not policy.include_all_items:
            continue
        if horizontal:
            _place(matrix, x, py + y, offset + i)
        else:
            _place(matrix, px + x, y, offset + i)
    return matrix


def build_with_pivot_column(container, pivot_x: int, pivot_y: int, full: bool = False) -> OccupancyMatrix:
    """One extra column holding a PIVOT cell at (pivot_x, pivot_y).

    A negative pivot_x puts the pivot in column 0 and shifts the page one
    column to the right.
    """
    count_x, count_y = container.count_x, container.count_y
    _check_dimensions(count_x, count_y)
    matrix = OccupancyMatrix(count_x + 1, count_y)
    shift = 1 if pivot_x < 0 else 0
    total = container.child_count()
    if full and total > count_x * count_y:
        raise InvalidLayout(f"{total} children do not fit a {count_x}x{count_y} page")
    for i in range(total):
        if full:
            x, y = _reading_order(i, count_x)
        else:
            x, y = container.position_of(container.child_at(i))
            if not (0 <= x < count_x and 0 <= y < count_y):
                raise InvalidLayout(f"slot {i} at ({x}, {y}) is outside a {count_x}x{count_y} grid")
        _place(matrix, x + shift, y, i)
    px = 0 if pivot_x < 0 else pivot_x
    if not matrix.in_bounds(px, pivot_y):
        raise InvalidLayout(f"pivot ({px}, {pivot_y}) is outside the page")
    if matrix[px, pivot_y] != EMPTY:
        raise InvalidLayout(f"pivot ({px}, {pivot_y}) overlaps slot {matrix[px, pivot_y]}")
    matrix[px, pivot_y] = PIVOT
    return matrix


def find_row(matrix: OccupancyMatrix, index: int) -> int:
    cell = matrix.find_cell(index)
    return -1 if cell is None else cell[1]
