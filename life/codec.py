"""
Load/save grids as ascii .gol or bit-packed binary .bgol files.

.gol:  "<width> <height>\\n", then height lines of width characters ('#' alive, ' ' dead),
       each ending in '\\n'.
.bgol: width and height as native-endian int32, then ceil(width*height/8) bytes;
       bit b (LSB first) of byte i is the cell at row-major index i*8 + b. Padding bits are 0.

Loaders validate the whole file before building the grid, so a bad file never yields a
partially filled grid.
"""

import logging
import re
from pathlib import Path

import numpy as np

from life.constants import (
    ALIVE_CHAR,
    ASCII_SUFFIX,
    BINARY_SUFFIX,
    BITS_PER_BYTE,
    DEAD_CHAR,
    HEADER_DTYPE,
    HEADER_SIZE,
)
from life.errors import FormatError, GridIOError
from life.grid import Grid

logger = logging.getLogger(__name__)

_CELL_CHARS = frozenset((ALIVE_CHAR, DEAD_CHAR))
_HEADER = re.compile(r"([0-9]+) ([0-9]+)")


def _read_bytes(path: Path | str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as err:
        raise FormatError(f"cannot open {path}: {err.strerror or err}") from err


def _write_bytes(path: Path | str, data: bytes) -> None:
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as err:
        raise GridIOError(f"cannot open {path} for writing: {err.strerror or err}") from err


def _parse_header(header: str, path: Path | str) -> tuple[int, int]:
    match = _HEADER.fullmatch(header)
    if match is None:
        raise FormatError(f"{path}: header must be '<width> <height>', got {header!r}")
    width, height = int(match[1]), int(match[2])
    if width <= 0 or height <= 0:
        raise FormatError(f"{path}: width and height must be positive, got {width}x{height}")
    return width, height


def load_ascii(path: Path | str) -> Grid:
    data = _read_bytes(path)
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError as err:
        raise FormatError(f"{path}: non-ascii byte at offset {err.start}") from err

    header, sep, body = text.partition("\n")
    if not sep:
        raise FormatError(f"{path}: missing header line")
    width, height = _parse_header(header, path)

    if len(body) < height * (width + 1):
        raise FormatError(f"{path}: {len(body)} bytes cannot hold {height} rows of {width} cells")

    rows = []
    pos = 0
    for y in range(height):
        if pos >= len(body):
            raise FormatError(f"{path}: expected {height} rows, found {y}")
        end = body.find("\n", pos)
        line = body[pos:] if end == -1 else body[pos:end]
        if len(line) != width:
            raise FormatError(f"{path}: row {y} has {len(line)} cells, expected {width}")
        illegal = set(line) - _CELL_CHARS
        if illegal:
            raise FormatError(f"{path}: row {y} has illegal characters {sorted(illegal)!r}")
        if end == -1:
            raise FormatError(f"{path}: row {y} is missing its newline")
        rows.append(line)
        pos = end + 1

    if pos < len(body):
        logger.warning("%s: ignoring %d bytes after the last row", path, len(body) - pos)
    logger.debug("loaded %dx%d ascii grid from %s", width, height, path)
    cells = np.frombuffer("".join(rows).encode("ascii"), dtype=np.uint8) == ord(ALIVE_CHAR)
    return Grid.from_array(cells.reshape(height, width))


def save_ascii(path: Path | str, grid: Grid) -> None:
    chars = np.where(grid.array, ALIVE_CHAR, DEAD_CHAR)
    lines = [f"{grid.width} {grid.height}\n"]
    lines.extend("".join(row) + "\n" for row in chars)
    _write_bytes(path, "".join(lines).encode("ascii"))
    logger.debug("saved %dx%d ascii grid to %s", grid.width, grid.height, path)


def _body_size(width: int, height: int) -> int:
    return -(-(width * height) // BITS_PER_BYTE)


def load_binary(path: Path | str) -> Grid:
    data = _read_bytes(path)
    if len(data) < HEADER_SIZE:
        raise FormatError(f"{path}: {len(data)} bytes is too short for the {HEADER_SIZE}-byte header")
    width, height = (int(v) for v in np.frombuffer(data, dtype=HEADER_DTYPE, count=2))
    if width < 0 or height < 0:
        raise FormatError(f"{path}: negative size {width}x{height} in header")

    nbytes = _body_size(width, height)
    available = len(data) - HEADER_SIZE
    if available < nbytes:
        raise FormatError(f"{path}: body has {available} bytes, {width}x{height} grid needs {nbytes}")
    if available > nbytes:
        logger.warning("%s: ignoring %d bytes after the cell data", path, available - nbytes)
    if nbytes == 0:
        return Grid(width, height)

    body = np.frombuffer(data, dtype=np.uint8, count=nbytes, offset=HEADER_SIZE)
    bits = np.unpackbits(body, count=width * height, bitorder="little")
    logger.debug("loaded %dx%d binary grid from %s", width, height, path)
    return Grid.from_array(bits.reshape(height, width))


def save_binary(path: Path | str, grid: Grid) -> None:
    header = np.array([grid.width, grid.height], dtype=HEADER_DTYPE).tobytes()
    body = np.packbits(grid.cells, bitorder="little").tobytes()
    _write_bytes(path, header + body)
    logger.debug("saved %dx%d binary grid to %s", grid.width, grid.height, path)


def load(path: Path | str) -> Grid:
    """Load by extension: .gol (ascii) or .bgol (binary)."""
    suffix = Path(path).suffix.lower()
    if suffix == ASCII_SUFFIX:
        return load_ascii(path)
    if suffix == BINARY_SUFFIX:
        return load_binary(path)
    raise FormatError(f"{path}: unknown grid file extension {suffix!r}")


def save(path: Path | str, grid: Grid) -> None:
    """Save by extension: .gol (ascii) or .bgol (binary)."""
    suffix = Path(path).suffix.lower()
    if suffix == ASCII_SUFFIX:
        save_ascii(path, grid)
    elif suffix == BINARY_SUFFIX:
        save_binary(path, grid)
    else:
        raise FormatError(f"{path}: unknown grid file extension {suffix!r}")
