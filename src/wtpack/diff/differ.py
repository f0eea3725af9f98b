"""Dependency differ for before/after lockfile snapshots."""

from __future__ import annotations

from collections.abc import Mapping

from wtpack.models import DiffStatus, PackageDiff, Snapshot, SnapshotDiff


def classify(before: str | None, after: str | None) -> DiffStatus:
    """Classify one package by which versions are present."""
    if before is None and after is not None:
        return DiffStatus.INSTALLED
    if before is not None and after is None:
        return DiffStatus.REMOVED
    if before != after:
        return DiffStatus.UPDATED
    return DiffStatus.UNCHANGED


def collect_package_diffs(
    before: Mapping[str, str],
    after: Mapping[str, str],
) -> list[PackageDiff]:
    """Compute one diff entry per package name found in either mapping.

    Entry order is not significant. Presence is decided by key, so an
    empty version string still counts as installed.
    """
    # dict.fromkeys dedupes while keeping first-seen order
    names = dict.fromkeys([*before.keys(), *after.keys()])

    diffs: list[PackageDiff] = []
    for name in names:
        before_ver = before.get(name)
        after_ver = after.get(name)
        diffs.append(PackageDiff(
            name=name,
            before_version=before_ver,
            after_version=after_ver,
            status=classify(before_ver, after_ver),
        ))
    return diffs


def diff_snapshots(before: Snapshot, after: Snapshot) -> SnapshotDiff:
    """Diff both dependency categories of two snapshots."""
    return SnapshotDiff(
        deps=collect_package_diffs(before.deps, after.deps),
        dev_deps=collect_package_diffs(before.dev_deps, after.dev_deps),
    )
