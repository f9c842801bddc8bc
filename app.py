"""
App shell: display and main loop. The world steps from elapsed time and tick_rate
(independent of frame rate). World, UI, and config are wired here.

Keys: SPACE pause/resume, N single step, T toggle toroidal, R reset,
S save <output>.gol and <output>.bgol, C save viewer settings
(loaded again on the next start without arguments), ESC quit.
"""

import logging
import sys
from pathlib import Path

import pygame

import config
from life import World, collision_scene, LifeError
from life import codec
from ui.grid_view import draw_grid, draw_status

logger = logging.getLogger(__name__)

TITLE = "Life"
BACKGROUND = (0, 0, 0)
STATUS_HEIGHT = 28
MAX_WINDOW = (1280, 900)
MIN_SCENE = 9
DEFAULT_CONFIG_NAME = "viewer"


def initial_grid(cfg: dict):
    """Pattern file from config if set, else the corner-gliders collision scene."""
    width, height = cfg["world"]["width"], cfg["world"]["height"]
    pattern = cfg.get("pattern")
    if pattern:
        try:
            return codec.load(pattern)
        except LifeError as err:
            logger.error("could not load %s, using collision scene: %s", pattern, err)
    try:
        return collision_scene(width, height)
    except LifeError as err:
        logger.error("%s; enlarging world to fit the collision scene", err)
        return collision_scene(max(width, MIN_SCENE), max(height, MIN_SCENE))


def save_state(world: World, output: str) -> str:
    codec.save(f"{output}.gol", world.state)
    codec.save(f"{output}.bgol", world.state)
    return f"saved {output}.gol / {output}.bgol"


def viewer_params(cfg: dict, world: World, toroidal: bool, tick_rate: int) -> dict:
    """Current viewer settings in config form."""
    return {
        **cfg,
        "world": {"width": world.width, "height": world.height},
        "tick_rate": tick_rate,
        "toroidal": toroidal,
    }


def run(config_path: str | None = None) -> None:
    cfg = config.load_config(config_path)
    config_name = Path(config_path).stem if config_path else DEFAULT_CONFIG_NAME
    world = World(initial_grid(cfg))
    toroidal = bool(cfg.get("toroidal", False))
    tick_rate = max(1, min(60, int(cfg.get("tick_rate", 10))))

    cell = max(1, int(cfg.get("cell_size", 10)))
    cell = max(1, min(cell, MAX_WINDOW[0] // max(1, world.width), MAX_WINDOW[1] // max(1, world.height)))
    grid_rect = pygame.Rect(0, 0, world.width * cell, world.height * cell)
    status_rect = pygame.Rect(0, grid_rect.height, max(grid_rect.width, 320), STATUS_HEIGHT)

    pygame.init()
    screen = pygame.display.set_mode((status_rect.width, grid_rect.height + STATUS_HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    logger.info("world %dx%d, %d alive, tick rate %d", world.width, world.height, world.alive_cells, tick_rate)

    generation = 0
    paused = True
    message = ""
    tick_accum = 0.0
    running = True

    while running:
        dt_s = clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                running = False
            elif event.key == pygame.K_SPACE:
                paused = not paused
            elif event.key == pygame.K_n:
                world.step(toroidal)
                generation += 1
            elif event.key == pygame.K_t:
                toroidal = not toroidal
            elif event.key == pygame.K_r:
                world = World(initial_grid(cfg))
                generation = 0
                message = "reset"
            elif event.key == pygame.K_c:
                path = config.save_config(viewer_params(cfg, world, toroidal, tick_rate), config_name)
                message = f"saved {path.name}"
            elif event.key == pygame.K_s:
                try:
                    message = save_state(world, cfg.get("output") or "output")
                except LifeError as err:
                    logger.error("save failed: %s", err)
                    message = "save failed"

        if not paused:
            tick_accum += dt_s * tick_rate
            # Cap ticks per frame so a slow frame never snowballs
            num_ticks = min(int(tick_accum), max(4, tick_rate // 10))
            tick_accum = min(tick_accum - num_ticks, 4.0)
            world.advance(num_ticks, toroidal)
            generation += num_ticks

        screen.fill(BACKGROUND)
        draw_grid(screen, grid_rect, world.state)
        draw_status(
            screen,
            status_rect,
            generation=generation,
            alive=world.alive_cells,
            toroidal=toroidal,
            paused=paused,
            message=message,
        )
        pygame.display.flip()

    logger.info("stopped at generation %d", generation)
    pygame.quit()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run(sys.argv[1] if len(sys.argv) > 1 else None)
