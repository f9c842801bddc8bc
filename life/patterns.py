"""Fixed starting patterns, each in its bounding box, plus the corner-gliders collision scene."""

from life.errors import InvalidArgument
from life.grid import Cell, Grid


def _from_coords(width: int, height: int, alive: list[tuple[int, int]]) -> Grid:
    grid = Grid(width, height)
    for x, y in alive:
        grid[x, y] = Cell.ALIVE
    return grid


def glider() -> Grid:
    """
    +---+
    | # |
    |  #|
    |###|
    +---+
    """
    return _from_coords(3, 3, [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)])


def r_pentomino() -> Grid:
    """
    +---+
    | ##|
    |## |
    | # |
    +---+
    """
    return _from_coords(3, 3, [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)])


def light_weight_spaceship() -> Grid:
    """
    +-----+
    | #  #|
    |#    |
    |#   #|
    |#### |
    +-----+
    """
    return _from_coords(5, 4, [(1, 0), (4, 0), (0, 1), (0, 2), (4, 2), (0, 3), (1, 3), (2, 3), (3, 3)])


def collision_scene(width: int, height: int) -> Grid:
    """
    Four gliders in the corners, each turned a further quarter so all fly towards the
    centre, and an R-pentomino in the middle. Cells are only ever switched on.
    """
    g0 = glider()
    g90, g180, g270 = g0.rotate(1), g0.rotate(2), g0.rotate(3)
    if width < 2 * g0.width + 3 or height < 2 * g0.height + 3:
        raise InvalidArgument(f"collision scene needs at least 9x9 cells, got {width}x{height}")
    grid = Grid(width, height)
    right = (width - 1) - g90.width
    bottom = (height - 1) - g180.height
    grid.merge(g0, 1, 1, alive_only=True)
    grid.merge(g90, right, 1, alive_only=True)
    grid.merge(g180, right, bottom, alive_only=True)
    grid.merge(g270, 1, bottom, alive_only=True)
    centre = r_pentomino()
    grid.merge(centre, min(width // 2, width - centre.width), min(height // 2, height - centre.height), alive_only=True)
    return grid
