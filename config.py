"""Load/save viewer parameters. Configs live in configs/ as {name}.json; last.txt names the last one saved."""

import json
import re
from pathlib import Path

from life.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
LAST_FILE = CONFIG_DIR / "last.txt"


def _sanitize_name(name: str) -> str:
    s = (name or "").strip()
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"[\s-]+", "_", s).strip("_")
    return s[:64] or "unnamed"


def get_config_path(name: str) -> Path:
    return CONFIG_DIR / f"{_sanitize_name(name)}.json"


def get_last_config() -> str | None:
    if not LAST_FILE.exists():
        return None
    try:
        return LAST_FILE.read_text().strip() or None
    except OSError:
        return None


def set_last_config(name: str) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    LAST_FILE.write_text(_sanitize_name(name))


def load_config(path: Path | str | None = None) -> dict:
    """Defaults merged with the given file, or with the last saved config. Unreadable files give defaults."""
    if path is None:
        last = get_last_config()
        if last is None:
            return _default_config()
        path = get_config_path(last)
    p = Path(path)
    if not p.exists():
        return _default_config()
    try:
        with open(p, "r") as f:
            return _merge_defaults(json.load(f))
    except (OSError, ValueError):
        return _default_config()


def save_config(params: dict, name: str) -> Path:
    path = get_config_path(name)
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(_merge_defaults(params), f, indent=2)
    set_last_config(name)
    return path


def _default_config() -> dict:
    return {
        "world": {"width": DEFAULT_WIDTH, "height": DEFAULT_HEIGHT},
        "tick_rate": 10,
        "toroidal": False,
        "cell_size": 10,
        "pattern": None,
        "output": "output",
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    if isinstance(data.get("world"), dict):
        d["world"] = {k: data["world"].get(k, v) for k, v in d["world"].items()}
    for k in ("tick_rate", "toroidal", "cell_size", "pattern", "output"):
        if k in data:
            d[k] = data[k]
    return d
