"""Shared constants: cell characters, file format layout, default sizes."""

import numpy as np

ALIVE_CHAR = "#"
DEAD_CHAR = " "

# .bgol header: width then height, native byte order.
HEADER_DTYPE = np.dtype("=i4")
HEADER_SIZE = 2 * HEADER_DTYPE.itemsize
BITS_PER_BYTE = 8

ASCII_SUFFIX = ".gol"
BINARY_SUFFIX = ".bgol"

DEFAULT_WIDTH, DEFAULT_HEIGHT = 64, 48
