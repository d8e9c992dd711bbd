"""Dense 2D grids backed by numpy object arrays.

Coordinates are ``(x, y)`` points with the origin at the top-left cell: x
grows to the right along a row and y grows downwards across rows. Cells are
stored row-major, so the value at ``(x, y)`` lives in ``data[y, x]``.
Rotations are named for a y-up reading of the same layout, which keeps
``rotate_clockwise`` equal to transposing and then reversing the rows.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Generic, TypeVar

import numpy as np
import numpy.typing as npt

from aoc.geometry.coordinates import GRID_COORDINATE_TYPE
from aoc.geometry.directions import PositionStatus
from aoc.geometry.primitives import Point, Vector

logger = logging.getLogger(__name__)

V = TypeVar("V")
U = TypeVar("U")


def grid_coordinate(x: int, y: int) -> Point:
    """Create a grid coordinate point."""
    return Point((x, y), GRID_COORDINATE_TYPE)


def _filled(width: int, height: int, value: Any) -> npt.NDArray[np.object_]:
    data = np.empty((height, width), dtype=object)
    data.fill(value)
    return data


def _check_sizes(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("All dimensions must be greater than zero")


class Grid2D(Generic[V]):
    """A rectangular grid of arbitrary values.

    Build grids with `from_default_value`, `from_flat` or `from_rows`.
    Transforms (`rotate_*`, `flip_*`, `expand`, `fill`) change the grid in
    place; `subgrid`, `map` and `copy` return new grids.

    Example:
        grid = Grid2D.from_rows([[1, 2, 3], [4, 5, 6]])
        grid.get(grid_coordinate(2, 0))  # 3
        grid.rotate_clockwise()
        grid.get_sizes()  # (2, 3)
    """

    def __init__(self, data: npt.NDArray[np.object_]) -> None:
        if data.ndim != 2 or 0 in data.shape:
            raise ValueError("All dimensions must be greater than zero")
        self._data = data

    @classmethod
    def from_default_value(cls, width: int, height: int, default: V) -> Grid2D[V]:
        """Create a grid with every cell set to default.

        The same default object is stored in every cell, so mutable values
        are shared.
        """
        _check_sizes(width, height)
        return cls(_filled(width, height, default))

    @classmethod
    def from_flat(cls, width: int, height: int, values: Sequence[V]) -> Grid2D[V]:
        """Create a grid from values listed row by row.

        Raises:
            ValueError: If a dimension is not positive or the number of
                values is not width * height.
        """
        _check_sizes(width, height)
        if len(values) != width * height:
            raise ValueError("Grid data length does not match specified dimensions")
        data = np.empty((height, width), dtype=object)
        for index, value in enumerate(values):
            data[divmod(index, width)] = value
        return cls(data)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[V]]) -> Grid2D[V]:
        """Create a grid from a list of equally long rows.

        Raises:
            ValueError: If there are no rows, the rows are empty, or their
                lengths differ.
        """
        if not rows or not rows[0]:
            raise ValueError("Grid data cannot be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same number of columns")
        data = np.empty((len(rows), width), dtype=object)
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                data[y, x] = value
        return cls(data)

    def get_width(self) -> int:
        return int(self._data.shape[1])

    def get_height(self) -> int:
        return int(self._data.shape[0])

    def get_sizes(self) -> tuple[int, int]:
        """(width, height) of the grid."""
        return (self.get_width(), self.get_height())

    def get_number_of_elements(self) -> int:
        return int(self._data.size)

    def contains(self, coordinate: Point) -> bool:
        x, y = coordinate
        return 0 <= x < self.get_width() and 0 <= y < self.get_height()

    def is_outside(self, coordinate: Point) -> bool:
        return not self.contains(coordinate)

    def is_on_border(self, coordinate: Point) -> bool:
        """Check whether coordinate is a cell in the first or last row or column."""
        if not self.contains(coordinate):
            return False
        x, y = coordinate
        return x in (0, self.get_width() - 1) or y in (0, self.get_height() - 1)

    def position_status(self, coordinate: Point) -> PositionStatus:
        if self.is_outside(coordinate):
            return PositionStatus.OUTSIDE
        if self.is_on_border(coordinate):
            return PositionStatus.ON_BORDER
        return PositionStatus.INSIDE

    def get(self, coordinate: Point) -> V | None:
        """Value at coordinate, or None when it is outside the grid."""
        if not self.contains(coordinate):
            return None
        x, y = coordinate
        return self._data[y, x]

    def get_mut(self, coordinate: Point) -> V | None:
        """Same as `get`: the returned object is the one stored in the grid."""
        return self.get(coordinate)

    def set(self, coordinate: Point, value: V) -> bool:
        """Store value at coordinate.

        Returns:
            False (and leaves the grid untouched) when coordinate is outside.
        """
        if not self.contains(coordinate):
            return False
        x, y = coordinate
        self._data[y, x] = value
        return True

    def __getitem__(self, coordinate: Point) -> V:
        if not self.contains(coordinate):
            raise IndexError(f"Coordinate {coordinate} is out of bounds")
        x, y = coordinate
        return self._data[y, x]

    def __setitem__(self, coordinate: Point, value: V) -> None:
        if not self.set(coordinate, value):
            raise IndexError(f"Coordinate {coordinate} is out of bounds")

    def rotate_clockwise(self) -> None:
        """Rotate a quarter turn: ``new[(x, y)] = old[(W - 1 - y, x)]``."""
        self._data = self._data.T[::-1, :].copy()

    def rotate_counter_clockwise(self) -> None:
        """Rotate a quarter turn back: ``new[(x, y)] = old[(y, H - 1 - x)]``."""
        self._data = self._data.T[:, ::-1].copy()

    def flip_horizontal(self) -> None:
        """Reverse the x axis."""
        self._data = self._data[:, ::-1].copy()

    def flip_vertical(self) -> None:
        """Reverse the y axis."""
        self._data = self._data[::-1, :].copy()

    def iter(self) -> Iterator[V]:
        """Values in row-major order."""
        return iter(self._data.flat)

    def __iter__(self) -> Iterator[V]:
        return self.iter()

    def iter_all(self) -> Iterator[tuple[Point, V]]:
        """(coordinate, value) pairs in row-major order."""
        for (y, x), value in np.ndenumerate(self._data):
            yield grid_coordinate(x, y), value

    def _check_row(self, y: int) -> None:
        if not 0 <= y < self.get_height():
            raise IndexError("Row index out of bounds")

    def _check_column(self, x: int) -> None:
        if not 0 <= x < self.get_width():
            raise IndexError("Column index out of bounds")

    def get_row(self, y: int) -> npt.NDArray[np.object_]:
        """Read-only view of row y, left to right."""
        self._check_row(y)
        view = self._data[y, :]
        view.flags.writeable = False
        return view

    def get_row_mut(self, y: int) -> npt.NDArray[np.object_]:
        """Writable view of row y; assignments change the grid."""
        self._check_row(y)
        return self._data[y, :]

    def get_column(self, x: int) -> npt.NDArray[np.object_]:
        """Read-only view of column x, top to bottom."""
        self._check_column(x)
        view = self._data[:, x]
        view.flags.writeable = False
        return view

    def get_column_mut(self, x: int) -> npt.NDArray[np.object_]:
        """Writable view of column x; assignments change the grid."""
        self._check_column(x)
        return self._data[:, x]

    def get_neighbors(self, coordinate: Point) -> set[Point]:
        """Orthogonally adjacent coordinates that are inside the grid."""
        return {
            neighbor
            for neighbor in coordinate.neighbors()
            if self.contains(neighbor)
        }

    def find_first(self, value: V) -> Point | None:
        """First coordinate holding value in row-major order, or None."""
        for (y, x), item in np.ndenumerate(self._data):
            if item == value:
                return grid_coordinate(x, y)
        return None

    def find_all(self, value: V) -> list[Point]:
        """Every coordinate holding value, in row-major order."""
        return [
            grid_coordinate(x, y)
            for (y, x), item in np.ndenumerate(self._data)
            if item == value
        ]

    def subgrid(self, start: Point, end: Point) -> Grid2D[V]:
        """Copy the rectangle with corners start and end, both included.

        Raises:
            ValueError: If a corner is outside the grid or end is before start
                on some axis.
        """
        if not (self.contains(start) and self.contains(end)):
            raise ValueError("Subgrid corners must be inside the grid")
        (x0, y0), (x1, y1) = start, end
        if x0 > x1 or y0 > y1:
            raise ValueError("Subgrid start must not be after its end")
        return Grid2D(self._data[y0 : y1 + 1, x0 : x1 + 1].copy())

    def expand(self, new_sizes: tuple[int, int], start: Point, default: V) -> None:
        """Grow the grid, moving old cell (x, y) to (x + start.x, y + start.y).

        Args:
            new_sizes: (width, height) after expansion.
            start: Where the old top-left cell ends up.
            default: Value for every new cell.

        Raises:
            ValueError: If the old contents do not fit at start.
        """
        new_width, new_height = new_sizes
        x0, y0 = start
        width, height = self.get_sizes()
        if x0 < 0 or y0 < 0 or x0 + width > new_width or y0 + height > new_height:
            raise ValueError("Expanded grid cannot hold the current contents")
        data = _filled(new_width, new_height, default)
        data[y0 : y0 + height, x0 : x0 + width] = self._data
        logger.debug(
            "Expanded grid from %dx%d to %dx%d", width, height, new_width, new_height
        )
        self._data = data

    def try_move(self, position: Point, direction: Vector) -> Point | None:
        """Step one cell from position along a unit axis direction.

        Returns:
            The neighboring coordinate, or None if it is outside the grid.

        Raises:
            ValueError: If position is outside the grid or direction is not a
                unit vector along one axis.
        """
        if not self.contains(position):
            raise ValueError("Current position is out of bounds")
        if not (direction.is_normalized() and direction.is_axis()):
            raise ValueError("Direction must be normalized and along an axis")
        moved = position.move_by(direction)
        if moved is None or not self.contains(moved):
            return None
        return moved

    def fill(self, value: V) -> None:
        """Set every cell to value."""
        self._data.fill(value)

    def map(self, func: Callable[[V], U]) -> Grid2D[U]:
        """New grid with func applied to every value."""
        return Grid2D(np.frompyfunc(func, 1, 1)(self._data))

    def copy(self) -> Grid2D[V]:
        return Grid2D(self._data.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return all(a == b for a, b in zip(self._data.flat, other._data.flat))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        width, height = self.get_sizes()
        return f"Grid2D(width={width}, height={height})"
