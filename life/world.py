"""
Double-buffered Game of Life world. Each step reads `current`, writes `next`, then swaps
the two grids. Rule B3/S23; edges are dead, or wrap around when toroidal=True.
"""

import numpy as np

from life.errors import BoundsError, InvalidArgument, ReadOnlyError
from life.grid import Grid

# 3x3 neighbourhood offsets (dx, dy), centre excluded.
NEIGHBOUR_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]

BIRTH = (3,)
SURVIVAL = (2, 3)


def _pad(cells: np.ndarray, toroidal: bool) -> np.ndarray:
    """Pad by one cell each side: dead border, or the opposite edge when toroidal."""
    if toroidal:
        return np.pad(cells, 1, mode="wrap")
    return np.pad(cells, 1, mode="constant", constant_values=False)


def neighbour_counts(cells: np.ndarray, toroidal: bool = False) -> np.ndarray:
    """Alive-neighbour count for every cell of a boolean (height, width) array."""
    h, w = cells.shape
    counts = np.zeros((h, w), dtype=np.uint8)
    if cells.size == 0:
        return counts
    pad = _pad(cells, toroidal).astype(np.uint8)
    for dx, dy in NEIGHBOUR_OFFSETS:
        counts += pad[1 + dy : 1 + dy + h, 1 + dx : 1 + dx + w]
    return counts


def apply_rule(cells: np.ndarray, counts: np.ndarray, out: np.ndarray) -> None:
    """Write the next generation of cells into out."""
    born = ~cells & np.isin(counts, BIRTH)
    survives = cells & np.isin(counts, SURVIVAL)
    np.logical_or(born, survives, out=out)


class GridView:
    """Read-only window onto a world's current grid. Always shows the latest generation."""

    __slots__ = ("_world",)

    _READ_ONLY = frozenset({
        "width", "height", "total_cells", "alive_cells", "dead_cells",
        "get_width", "get_height", "get_total_cells", "get_alive_cells", "get_dead_cells",
        "array", "cells", "get", "crop", "rotate", "copy",
    })

    def __init__(self, world: "World") -> None:
        self._world = world

    def __getattr__(self, name: str):
        if name in GridView._READ_ONLY:
            return getattr(self._world._current, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def _read_only(self, *args, **kwargs):
        raise ReadOnlyError("world state is read-only; use copy() to get a mutable grid")

    set = resize = merge = __setitem__ = _read_only

    def __getitem__(self, xy):
        return self._world._current[xy]

    def __copy__(self) -> Grid:
        return self._world._current.copy()

    def __deepcopy__(self, memo: dict) -> Grid:
        return self._world._current.copy()

    def __eq__(self, other: object) -> bool:
        return self._world._current == other

    __hash__ = None

    def __repr__(self) -> str:
        return f"GridView({self._world._current!r})"

    def __str__(self) -> str:
        return str(self._world._current)


class World:
    """Owns two equally sized grids (current, next) and evolves them step by step."""

    __slots__ = ("_current", "_next")

    def __init__(self, width: int | Grid = 0, height: int | None = None) -> None:
        if isinstance(width, (Grid, GridView)):
            self._current = width.copy()
        else:
            self._current = Grid(width, height)
        self._next = Grid(self._current.width, self._current.height)

    # -- queries --

    @property
    def width(self) -> int:
        return self._current.width

    @property
    def height(self) -> int:
        return self._current.height

    @property
    def total_cells(self) -> int:
        return self._current.total_cells

    @property
    def alive_cells(self) -> int:
        return self._current.alive_cells

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
    def state(self) -> GridView:
        return GridView(self)

    def get_state(self) -> GridView:
        return self.state

    # -- mutation --

    def resize(self, new_width: int, new_height: int | None = None) -> None:
        self._current.resize(new_width, new_height)
        self._next = Grid(self._current.width, self._current.height)

    def count_alive_neighbours(self, x: int, y: int, toroidal: bool = False) -> int:
        """Alive cells in the 3x3 square around (x, y), excluding (x, y) itself."""
        w, h = self.width, self.height
        if not (0 <= x < w and 0 <= y < h):
            raise BoundsError(f"({x}, {y}) is outside a {w}x{h} world")
        cells = self._current.array
        count = 0
        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if toroidal:
                # Python's % is a true modulo: -1 % w == w - 1.
                nx, ny = nx % w, ny % h
            elif not (0 <= nx < w and 0 <= ny < h):
                continue
            count += int(cells[ny, nx])
        return count

    def step(self, toroidal: bool = False) -> None:
        cells = self._current.array
        apply_rule(cells, neighbour_counts(cells, toroidal), out=self._next._cells)
        self._current, self._next = self._next, self._current

    def advance(self, steps: int, toroidal: bool = False) -> None:
        if steps < 0:
            raise InvalidArgument(f"cannot advance a negative number of steps ({steps})")
        for _ in range(steps):
            self.step(toroidal)

    def __repr__(self) -> str:
        return f"World({self.width}, {self.height}, alive={self.alive_cells})"
