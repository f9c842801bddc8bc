"""UI: grid view, status bar and cell colours."""

from ui.grid_view import draw_grid, draw_status
from ui.colors import cells_to_rgb

__all__ = ["draw_grid", "draw_status", "cells_to_rgb"]
