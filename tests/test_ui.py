import numpy as np
import pygame

from life import World, glider
from ui.colors import ALIVE_RGB, DEAD_RGB, cells_to_rgb
from ui.grid_view import draw_grid


def test_cells_to_rgb():
    rgb = cells_to_rgb(np.array([[True, False]]))
    assert rgb.shape == (1, 2, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[0, 0]) == tuple(ALIVE_RGB)
    assert tuple(rgb[0, 1]) == tuple(DEAD_RGB)


def test_draw_grid_scales_cells():
    surface = pygame.Surface((30, 30))
    draw_grid(surface, pygame.Rect(0, 0, 30, 30), World(glider()).state)
    # glider cell (1, 0) is alive, (0, 0) is dead; each cell is 10x10 pixels
    assert tuple(surface.get_at((15, 5)))[:3] == tuple(ALIVE_RGB)
    assert tuple(surface.get_at((5, 5)))[:3] == tuple(DEAD_RGB)
    assert tuple(surface.get_at((5, 25)))[:3] == tuple(ALIVE_RGB)
