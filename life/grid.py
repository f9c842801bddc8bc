"""2D grid of Game of Life cells. Boolean buffer of shape (height, width), row-major; (x, y) = (column, row)."""

from enum import Enum

import numpy as np

from life.constants import ALIVE_CHAR, DEAD_CHAR
from life.errors import BoundsError, InvalidArgument


class Cell(str, Enum):
    """Cell state. Values are the characters used by the ascii format."""

    DEAD = DEAD_CHAR
    ALIVE = ALIVE_CHAR


def _to_bool(value) -> bool:
    """Cell, its character, or any truthy/falsy value -> stored bool."""
    if isinstance(value, str):
        try:
            return Cell(value) is Cell.ALIVE
        except ValueError as err:
            raise InvalidArgument(f"not a cell value: {value!r}") from err
    return bool(value)


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise InvalidArgument(f"grid size must be non-negative, got {width}x{height}")


class Grid:
    """Dense rectangular buffer of cells with geometry operations. Copies are independent."""

    __slots__ = ("_cells",)

    def __init__(self, width: int = 0, height: int | None = None) -> None:
        if height is None:
            height = width
        _check_size(width, height)
        self._cells = np.zeros((height, width), dtype=bool)

    @classmethod
    def from_array(cls, cells: np.ndarray) -> "Grid":
        """New grid holding a copy of a 2D array indexed [y, x]; nonzero = alive."""
        arr = np.asarray(cells)
        if arr.ndim != 2:
            raise InvalidArgument(f"expected a 2D array, got {arr.ndim}D")
        grid = cls.__new__(cls)
        grid._cells = np.array(arr, dtype=bool, order="C")
        return grid

    # -- queries --

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def total_cells(self) -> int:
        return self._cells.size

    @property
    def alive_cells(self) -> int:
        return int(np.count_nonzero(self._cells))

    @property
    def dead_cells(self) -> int:
        return self.total_cells - self.alive_cells

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    def get_total_cells(self) -> int:
        return self.total_cells

    def get_alive_cells(self) -> int:
        return self.alive_cells

    def get_dead_cells(self) -> int:
        return self.dead_cells

    @property
    def array(self) -> np.ndarray:
        """Read-only 2D view [y, x] of the buffer."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def cells(self) -> np.ndarray:
        """Read-only flat view in row-major order: index = y * width + x."""
        return self.array.reshape(-1)

    # -- element access --

    def _check_coords(self, x: int, y: int) -> None:
        h, w = self._cells.shape
        if not 0 <= x < w:
            raise BoundsError(f"x={x} is out of bounds for width {w}")
        if not 0 <= y < h:
            raise BoundsError(f"y={y} is out of bounds for height {h}")

    def __getitem__(self, xy: tuple[int, int]) -> Cell:
        x, y = xy
        self._check_coords(x, y)
        return Cell.ALIVE if self._cells[y, x] else Cell.DEAD

    def __setitem__(self, xy: tuple[int, int], value) -> None:
        x, y = xy
        self._check_coords(x, y)
        self._cells[y, x] = _to_bool(value)

    def get(self, x: int, y: int) -> Cell:
        return self[x, y]

    def set(self, x: int, y: int, value) -> None:
        self[x, y] = value

    # -- geometry --

    def resize(self, new_width: int, new_height: int | None = None) -> None:
        """Keep the overlapping top-left rectangle; new cells are dead."""
        if new_height is None:
            new_height = new_width
        _check_size(new_width, new_height)
        resized = np.zeros((new_height, new_width), dtype=bool)
        h = min(self.height, new_height)
        w = min(self.width, new_width)
        resized[:h, :w] = self._cells[:h, :w]
        self._cells = resized

    def crop(self, x0: int, y0: int, x1: int, y1: int) -> "Grid":
        """New grid of the half-open window [x0, x1) x [y0, y1). This grid is unchanged."""
        w, h = self.width, self.height
        if not (0 <= x0 <= w and 0 <= x1 <= w and 0 <= y0 <= h and 0 <= y1 <= h):
            raise InvalidArgument(f"crop window ({x0}, {y0})-({x1}, {y1}) is outside a {w}x{h} grid")
        if x1 < x0 or y1 < y0:
            raise InvalidArgument(f"crop window ({x0}, {y0})-({x1}, {y1}) has a negative size")
        return Grid.from_array(self._cells[y0:y1, x0:x1])

    def merge(self, other: "Grid", x0: int, y0: int, alive_only: bool = False) -> None:
        """
        Overlay other with its top-left corner at (x0, y0). Every covered cell is copied,
        unless alive_only, in which case cells are only ever switched on.
        """
        w, h = self.width, self.height
        if not (0 <= x0 <= w and 0 <= y0 <= h):
            raise InvalidArgument(f"merge offset ({x0}, {y0}) is outside a {w}x{h} grid")
        if x0 + other.width > w or y0 + other.height > h:
            raise InvalidArgument(
                f"{other.width}x{other.height} grid does not fit in a {w}x{h} grid at ({x0}, {y0})"
            )
        region = self._cells[y0 : y0 + other.height, x0 : x0 + other.width]
        if alive_only:
            region |= other.array
        else:
            region[...] = other.array

    def rotate(self, rotation: int) -> "Grid":
        """New grid turned rotation quarter turns: clockwise if positive, counter-clockwise if negative."""
        turns = rotation % 4
        # np.rot90 turns counter-clockwise for a positive k.
        return Grid.from_array(np.rot90(self._cells, k=-turns))

    # -- value semantics --

    def copy(self) -> "Grid":
        return Grid.from_array(self._cells)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "Grid":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        other_cells = getattr(other, "array", None)
        if not isinstance(other_cells, np.ndarray):
            return NotImplemented
        return self._cells.shape == other_cells.shape and bool(np.array_equal(self._cells, other_cells))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid({self.width}, {self.height}, alive={self.alive_cells})"

    def __str__(self) -> str:
        border = "+" + "-" * self.width + "+\n"
        chars = np.where(self._cells, ALIVE_CHAR, DEAD_CHAR)
        rows = "".join("|" + "".join(row) + "|\n" for row in chars)
        return border + rows + border
