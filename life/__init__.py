"""Life: Game of Life grid, double-buffered world, .gol/.bgol codecs and starting patterns."""

from life.grid import Cell, Grid
from life.world import World, GridView
from life.patterns import glider, r_pentomino, light_weight_spaceship, collision_scene
from life.codec import load, save, load_ascii, save_ascii, load_binary, save_binary
from life.errors import LifeError, BoundsError, InvalidArgument, FormatError, GridIOError, ReadOnlyError

__all__ = [
    "Cell", "Grid", "World", "GridView",
    "glider", "r_pentomino", "light_weight_spaceship", "collision_scene",
    "load", "save", "load_ascii", "save_ascii", "load_binary", "save_binary",
    "LifeError", "BoundsError", "InvalidArgument", "FormatError", "GridIOError", "ReadOnlyError",
]
