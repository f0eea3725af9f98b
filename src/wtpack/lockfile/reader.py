"""Lockfile snapshot reader.

Reads ``package-lock.json`` and extracts the root package's
``dependencies`` and ``devDependencies`` as a :class:`Snapshot`.
"""

from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import Any

from wtpack.models import DependencyCategory, Snapshot

LOCKFILE_NAME = "package-lock.json"


class LockfileError(Exception):
    """Raised when a lockfile exists but cannot be parsed."""


def read_snapshot(path: str | Path) -> Snapshot:
    """Load a snapshot from the lockfile at *path*.

    A missing lockfile means no packages and returns an empty snapshot.

    Raises:
        LockfileError: If the file is not valid JSON or its root is not
            an object.
    """
    path = Path(path)
    if not path.is_file():
        return Snapshot()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LockfileError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise LockfileError(
            f"Expected a JSON object in {path}, got {type(data).__name__}"
        )

    return parse_snapshot(data)


def parse_snapshot(data: dict[str, Any]) -> Snapshot:
    """Extract a snapshot from already-parsed lockfile content."""
    packages = data.get("packages")
    root = packages.get("") if isinstance(packages, dict) else None
    if not isinstance(root, dict):
        return Snapshot()

    return Snapshot(
        deps=_read_category(root, DependencyCategory.DEPENDENCIES),
        dev_deps=_read_category(root, DependencyCategory.DEV_DEPENDENCIES),
    )


def _read_category(root: dict[str, Any], category: DependencyCategory) -> dict[str, str]:
    raw = root.get(category.value)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        warnings.warn(
            f"Ignoring '{category.value}' in lockfile: expected an object, "
            f"got {type(raw).__name__}",
            stacklevel=3,
        )
        return {}

    versions: dict[str, str] = {}
    for name, version in raw.items():
        if not isinstance(version, str):
            warnings.warn(
                f"Ignoring '{name}' in lockfile '{category.value}': expected a version "
                f"string, got {type(version).__name__}",
                stacklevel=3,
            )
            continue
        versions[str(name)] = version
    return versions
