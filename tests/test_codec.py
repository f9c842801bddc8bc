import numpy as np
import pytest

from life import (
    Cell,
    FormatError,
    Grid,
    GridIOError,
    World,
    glider,
    light_weight_spaceship,
    load,
    load_ascii,
    load_binary,
    save,
    save_ascii,
    save_binary,
)

GLIDER_GOL = "3 3\n # \n  #\n###\n"


def _header(width: int, height: int) -> bytes:
    return np.array([width, height], dtype="=i4").tobytes()


def _random_grid(width: int, height: int, seed: int = 0) -> Grid:
    rng = np.random.default_rng(seed)
    return Grid.from_array(rng.random((height, width)) < 0.4)


@pytest.fixture
def gol_file(tmp_path):
    def write(text: str):
        path = tmp_path / "grid.gol"
        path.write_bytes(text.encode("latin-1"))
        return path

    return write


@pytest.fixture
def bgol_file(tmp_path):
    def write(data: bytes):
        path = tmp_path / "grid.bgol"
        path.write_bytes(data)
        return path

    return write


# -- ascii --


def test_save_ascii_layout(tmp_path):
    path = tmp_path / "glider.gol"
    save_ascii(path, glider())
    assert path.read_bytes() == GLIDER_GOL.encode()


def test_load_ascii(gol_file):
    g = load_ascii(gol_file("3 3\n# #\n## \n # \n"))
    assert (g.width, g.height) == (3, 3)
    alive = {(x, y) for y in range(3) for x in range(3) if g.get(x, y) is Cell.ALIVE}
    assert alive == {(0, 0), (2, 0), (0, 1), (1, 1), (1, 2)}


def test_load_ascii_rectangular(gol_file):
    g = load_ascii(gol_file("4 2\n#   \n   #\n"))
    assert (g.width, g.height) == (4, 2)
    assert g.get(0, 0) is Cell.ALIVE
    assert g.get(3, 1) is Cell.ALIVE
    assert g.alive_cells == 2


@pytest.mark.parametrize(
    "text",
    [
        "3 3\n# #\n##\n # \n",  # short row
        "3 3\n# #\n##  \n # \n",  # long row
        "3 3\n#x#\n## \n # \n",  # illegal character
        "3 3\n# #\n## \n.# \n",  # illegal character
        "3 3\n# #\n## \n # ",  # last row without newline
        "3 3\n# #\n## \n",  # missing row
        "3 3",  # header only, no newline
        "0 3\n",
        "3 -1\n",
        "a b\n",
        "3\n# #\n",
        "3 3 3\n",
        "3  3\n# #\n## \n # \n",  # double space
        "3\t3\n# #\n## \n # \n",
        "+3 3\n# #\n## \n # \n",
        "3_0 1\n",
        "1000000000 1000000000\n#\n",  # huge header, tiny body
        "",
        "3 3\n# #\n## \n \xe9 \n",  # non-ascii byte
    ],
)
def test_load_ascii_rejects(gol_file, text):
    with pytest.raises(FormatError):
        load_ascii(gol_file(text))


def test_load_ascii_missing_file(tmp_path):
    with pytest.raises(FormatError):
        load_ascii(tmp_path / "nope.gol")


def test_save_ascii_unwritable(tmp_path):
    with pytest.raises(GridIOError):
        save_ascii(tmp_path / "missing" / "grid.gol", glider())
    with pytest.raises(OSError):
        save_ascii(tmp_path / "missing" / "grid.gol", glider())


@pytest.mark.parametrize("grid", [glider(), light_weight_spaceship(), _random_grid(7, 5), Grid(1)])
def test_ascii_round_trip(tmp_path, grid):
    path = tmp_path / "grid.gol"
    save_ascii(path, grid)
    assert load_ascii(path) == grid


# -- binary --


def test_save_binary_layout(tmp_path):
    path = tmp_path / "glider.bgol"
    save_binary(path, glider())
    # cells 0..8 row-major: 0 1 0 | 0 0 1 | 1 1 1, packed LSB first
    assert path.read_bytes() == _header(3, 3) + bytes([0b11100010, 0b00000001])


def test_load_binary(bgol_file):
    g = load_binary(bgol_file(_header(2, 2) + bytes([0b00001001])))
    assert (g.width, g.height) == (2, 2)
    assert g.get(0, 0) is Cell.ALIVE
    assert g.get(1, 1) is Cell.ALIVE
    assert g.alive_cells == 2


def test_load_binary_ignores_padding_bits(bgol_file):
    g = load_binary(bgol_file(_header(2, 2) + bytes([0b11111001])))
    assert g.alive_cells == 2


def test_load_binary_multi_byte(bgol_file):
    # 4x3 = 12 cells: byte 0 holds row 0 and row 1, byte 1 holds row 2.
    g = load_binary(bgol_file(_header(4, 3) + bytes([0b10000001, 0b00001000])))
    alive = {(x, y) for y in range(3) for x in range(4) if g[x, y] is Cell.ALIVE}
    assert alive == {(0, 0), (3, 1), (3, 2)}


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\x01\x00\x00",
        _header(3, 3)[:7],
        _header(4, 4) + b"\x00",
        _header(3, 3) + b"\xff",
        _header(-1, 2),
        _header(2, -5) + b"\x00",
    ],
)
def test_load_binary_rejects(bgol_file, data):
    with pytest.raises(FormatError):
        load_binary(bgol_file(data))


def test_load_binary_missing_file(tmp_path):
    with pytest.raises(FormatError):
        load_binary(tmp_path / "nope.bgol")


def test_load_binary_ignores_trailing_bytes(bgol_file):
    g = load_binary(bgol_file(_header(2, 2) + bytes([0b0110, 0xFF, 0xFF])))
    assert g == Grid.from_array([[0, 1], [1, 0]])


def test_save_binary_unwritable(tmp_path):
    with pytest.raises(GridIOError):
        save_binary(tmp_path / "missing" / "grid.bgol", glider())


@pytest.mark.parametrize(
    "grid",
    [glider(), light_weight_spaceship(), _random_grid(13, 7, 1), _random_grid(8, 8, 2), Grid(), Grid(5, 0), Grid(1)],
)
def test_binary_round_trip(tmp_path, grid):
    path = tmp_path / "grid.bgol"
    save_binary(path, grid)
    assert path.stat().st_size == 8 + -(-grid.total_cells // 8)
    loaded = load_binary(path)
    assert (loaded.width, loaded.height) == (grid.width, grid.height)
    assert loaded == grid


# -- dispatch --


def test_load_and_save_by_extension(tmp_path):
    grid = _random_grid(6, 4, 3)
    for name in ("a.gol", "a.bgol"):
        save(tmp_path / name, grid)
        assert load(tmp_path / name) == grid
    assert (tmp_path / "a.gol").read_text().startswith("6 4\n")


def test_unknown_extension(tmp_path):
    with pytest.raises(FormatError):
        save(tmp_path / "a.txt", glider())
    with pytest.raises(FormatError):
        load(tmp_path / "a.txt")


def test_save_world_state(tmp_path):
    world = World(glider())
    world.step()
    save(tmp_path / "w.bgol", world.state)
    save(tmp_path / "w.gol", world.state)
    assert load(tmp_path / "w.bgol") == world.state
    assert load(tmp_path / "w.gol") == world.state
