"""Errors raised by the grid, world and codecs. All share LifeError as a root."""


class LifeError(Exception):
    pass


class BoundsError(LifeError, IndexError):
    """Coordinate outside the grid extent."""


class InvalidArgument(LifeError, ValueError):
    """Negative size, bad crop window, merge that does not fit, negative step count."""


class FormatError(LifeError, ValueError):
    """Malformed or unreadable .gol / .bgol file."""


class GridIOError(LifeError, OSError):
    """File could not be opened for writing."""


class ReadOnlyError(LifeError, TypeError):
    """Mutation attempted through a read-only view of a world's state."""
