"""Core data models for wtpack.

Defines the schemas for:
- Lockfile snapshots (top-level dependencies at a point in time)
- Diff entries (per-package before/after state)
- Snapshot diffs (entries for every dependency category)
- Install results (outcome of the package manager subprocess)
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---


class DiffStatus(enum.StrEnum):
    INSTALLED = "installed"
    UPDATED = "updated"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class DependencyCategory(enum.StrEnum):
    """Dependency groups of the root package, named as in package-lock.json."""

    DEPENDENCIES = "dependencies"
    DEV_DEPENDENCIES = "devDependencies"


# --- Snapshot ---


class Snapshot(BaseModel):
    """Top-level dependencies recorded in a lockfile, by category.

    Built fresh before and after the install step. Never mutated.
    """

    model_config = ConfigDict(frozen=True)

    deps: dict[str, str] = Field(default_factory=dict)
    dev_deps: dict[str, str] = Field(default_factory=dict)

    def category(self, category: DependencyCategory) -> dict[str, str]:
        if category == DependencyCategory.DEV_DEPENDENCIES:
            return self.dev_deps
        return self.deps

    @property
    def is_empty(self) -> bool:
        return not self.deps and not self.dev_deps


# --- Diff ---


class PackageDiff(BaseModel):
    """A package and its state. When updated, it holds both versions."""

    model_config = ConfigDict(frozen=True)

    name: str
    before_version: str | None = None
    after_version: str | None = None
    status: DiffStatus


class SnapshotDiff(BaseModel):
    """Diff entries for both dependency categories."""

    model_config = ConfigDict(frozen=True)

    deps: list[PackageDiff] = Field(default_factory=list)
    dev_deps: list[PackageDiff] = Field(default_factory=list)

    def entries(self, category: DependencyCategory) -> list[PackageDiff]:
        if category == DependencyCategory.DEV_DEPENDENCIES:
            return self.dev_deps
        return self.deps

    def by_status(
        self,
        status: DiffStatus,
        category: DependencyCategory,
    ) -> list[PackageDiff]:
        return [d for d in self.entries(category) if d.status == status]

    def displayed_names(self) -> list[str]:
        """Names of every entry that shows up in the summary."""
        return [
            d.name
            for d in [*self.deps, *self.dev_deps]
            if d.status != DiffStatus.UNCHANGED
        ]

    @property
    def has_changes(self) -> bool:
        return bool(self.displayed_names())


# --- Install ---


class InstallResult(BaseModel):
    """Outcome of running the package manager's install command."""

    command: list[str]
    returncode: int
    stderr: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0
