"""core/tuning.py — Data-driven fishing constants.

Every timer, rate and chance the fishing states use has a built-in
default; ``data/tuning.toml`` may override any of them.  The file is
read once at startup::

    from core import tuning
    tuning.load()
    rate = tuning.get("fishing.reeling", "tension_increase_rate", 0.5)

Hot-reload: ``reload()`` re-reads the last file.  Tests can skip the
filesystem entirely with ``load_dict({...})``.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


_data: dict = {}
_path: Path | None = None


def default_path() -> Path:
    """``data/tuning.toml`` one level above ``core/``."""
    return Path(__file__).resolve().parent.parent / "data" / "tuning.toml"


def load(path: str | Path | None = None) -> int:
    """Load (or reload) tuning values.  Returns the number of leaves read.

    A missing file is not an error: every consumer falls back to its
    own default.
    """
    global _data, _path

    path = default_path() if path is None else Path(path)
    _path = path

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return 0

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    count = _count_leaves(_data)
    print(f"[TUNING] Loaded {count} values from {path}")
    return count


def load_dict(data: dict) -> None:
    """Replace the tuning table with *data* (no file involved)."""
    global _data, _path
    _data = dict(data)
    _path = None


def reload() -> int:
    """Re-read the tuning file from disk (hot-reload)."""
    if _path is None:
        return _count_leaves(_data)
    return load(_path)


def get(section_path: str, key: str, default=None):
    """Read one value.

    *section_path* uses dot-notation for nested tables, e.g.
    ``"fishing.reeling"`` looks up ``[fishing.reeling]``.

    >>> get("fishing.reeling", "max_tension", 1.0)
    1.0
    """
    node = _walk(section_path)
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def section(section_path: str) -> dict:
    """Return an entire table (shallow copy), or an empty dict."""
    node = _walk(section_path)
    if isinstance(node, dict):
        return dict(node)
    return {}


def _walk(section_path: str):
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
        if node is None:
            return None
    return node


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
