"""wtpack: What the Pack? Shows which dependencies an npm install changed."""

__version__ = "1.0.0"

from wtpack.config import WtpackConfig, find_config, load_config
from wtpack.diff.differ import classify, collect_package_diffs, diff_snapshots
from wtpack.lockfile.reader import LockfileError, parse_snapshot, read_snapshot
from wtpack.models import (
    DependencyCategory,
    DiffStatus,
    InstallResult,
    PackageDiff,
    Snapshot,
    SnapshotDiff,
)
from wtpack.runner.installer import NpmInstaller

__all__ = [
    "classify",
    "collect_package_diffs",
    "DependencyCategory",
    "diff_snapshots",
    "DiffStatus",
    "find_config",
    "InstallResult",
    "load_config",
    "LockfileError",
    "NpmInstaller",
    "PackageDiff",
    "parse_snapshot",
    "read_snapshot",
    "Snapshot",
    "SnapshotDiff",
    "WtpackConfig",
    "__version__",
]
