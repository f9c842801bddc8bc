"""Cell colours. Alive cells bright on a near-black background."""

import numpy as np

ALIVE_RGB = np.array([235, 235, 220], dtype=np.uint8)
DEAD_RGB = np.array([12, 12, 16], dtype=np.uint8)


def cells_to_rgb(cells: np.ndarray) -> np.ndarray:
    """(height, width) bool -> (height, width, 3) uint8 RGB."""
    return np.where(np.asarray(cells, dtype=bool)[:, :, np.newaxis], ALIVE_RGB, DEAD_RGB).astype(np.uint8)
