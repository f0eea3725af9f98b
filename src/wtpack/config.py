"""Config file loading and auto-discovery for wtpack.

Searches for ``wtpack.yaml`` in the current directory and parent
directories, parses it, and resolves the lockfile path against the
config file's location.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

CONFIG_FILENAME = "wtpack.yaml"


@dataclass(frozen=True)
class WtpackConfig:
    """Parsed wtpack project configuration."""

    config_path: Path | None = None
    lockfile: str | None = None
    command: str = "npm"
    show: bool = False


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``wtpack.yaml`` at or above *start* (default ``cwd()``)."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(
    path: str | Path | None = None,
    *,
    auto_discover: bool = True,
) -> WtpackConfig:
    """Load settings from *path*, or from a discovered ``wtpack.yaml``.

    An explicit *path* must exist. With no file at all every setting
    keeps its default.
    """
    if path is None:
        found = find_config() if auto_discover else None
        return _parse_config(found) if found else WtpackConfig()

    config_path = Path(path).resolve()
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return _parse_config(config_path)


def _parse_config(config_path: Path) -> WtpackConfig:
    """Read and parse a YAML config file, resolving the lockfile path."""
    text = config_path.read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}

    if not isinstance(data, dict):
        msg = f"Expected a YAML mapping in {config_path}, got {type(data).__name__}"
        raise ValueError(msg)

    lockfile = data.get("lockfile")
    if lockfile is not None:
        lockfile = str((config_path.parent / lockfile).resolve())

    return WtpackConfig(
        config_path=config_path,
        lockfile=lockfile,
        command=str(data.get("command") or "npm"),
        show=bool(data.get("show", False)),
    )
