"""Simulation grid with thin grey border, and a one-line status bar underneath."""

import pygame

from ui.colors import cells_to_rgb

BORDER_COLOR = (80, 80, 80)
BORDER_PX = 1
STATUS_COLOR = (200, 200, 200)
STATUS_BG = (0, 0, 0)
FONT_SIZE = 20

_font: pygame.font.Font | None = None


def _ensure_font() -> pygame.font.Font:
    global _font
    if _font is None:
        _font = pygame.font.Font(None, FONT_SIZE)
    return _font


def draw_grid(surface: pygame.Surface, grid_rect: pygame.Rect, state) -> None:
    """Draw a grid (or world state view) scaled to fill grid_rect."""
    if state.width == 0 or state.height == 0:
        return
    rgb = cells_to_rgb(state.array)
    # pygame surfaces are indexed [x, y]; the grid buffer is [y, x].
    img = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
    scaled = pygame.transform.scale(img, (grid_rect.width, grid_rect.height))
    surface.blit(scaled, grid_rect.topleft)
    pygame.draw.rect(surface, BORDER_COLOR, grid_rect, BORDER_PX)


def draw_status(
    surface: pygame.Surface,
    rect: pygame.Rect,
    *,
    generation: int,
    alive: int,
    toroidal: bool,
    paused: bool,
    message: str = "",
) -> None:
    surface.fill(STATUS_BG, rect)
    mode = "toroidal" if toroidal else "bounded"
    text = f"gen {generation}   alive {alive}   {mode}   {'paused' if paused else 'running'}"
    if message:
        text += f"   | {message}"
    img = _ensure_font().render(text, True, STATUS_COLOR)
    surface.blit(img, (rect.x + 6, rect.y + (rect.height - img.get_height()) // 2))
