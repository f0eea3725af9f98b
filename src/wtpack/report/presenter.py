"""Text rendering for wtpack output.

Every function returns a styled string and never writes to the terminal.
Styling uses ``click.style``; ``click.echo`` drops it when the output is
not a TTY, and ``click.unstyle`` strips it for plain-text comparisons.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from wtpack.models import (
    DependencyCategory,
    DiffStatus,
    InstallResult,
    PackageDiff,
    Snapshot,
    SnapshotDiff,
)

BORDER_WIDTH = 40
NAME_MARGIN = 2

# Statuses printed in the summary, in order. Unchanged is never printed.
SUMMARY_SECTIONS: list[tuple[DiffStatus, str, str]] = [
    (DiffStatus.INSTALLED, "🟢 Installed", "green"),
    (DiffStatus.UPDATED, "🟡 Updated", "yellow"),
    (DiffStatus.REMOVED, "🔴 Removed", "red"),
]

NOTHING_CHANGED = "📦 No packages were changed"


def _gray(text: str) -> str:
    return click.style(text, fg="bright_black")


def _dim(text: str) -> str:
    return click.style(text, dim=True)


def border() -> str:
    return _dim("─" * BORDER_WIDTH)


def render_header() -> str:
    title = click.style("  wtpack  ", fg="bright_blue", bold=True) + _gray(" What the Pack?")
    return "\n".join([border(), title, border()])


def render_missing_lockfile(lockfile_name: str = "package-lock.json") -> str:
    return _gray(f"📦 No {lockfile_name} found.")


def render_install_command(command: str, args: list[str]) -> str:
    return click.style(" ".join([command, "install", *args]), fg="white", bold=True)


def render_install_failure(result: InstallResult, command: str = "npm") -> str:
    """Error block shown when the install subprocess exits non-zero."""
    badge = click.style(" ERR ", bg="red", fg="white", bold=True)
    out = f"{badge} {click.style(f'{command} install failed', fg='red')}"
    if result.stderr:
        out += "\n" + _gray(result.stderr)
    return out


# --- Package listings ---


def _render_category(category: DependencyCategory, deps: dict[str, str]) -> list[str]:
    if not deps:
        return []
    lines = ["  " + _gray(f"{category.value}:")]
    lines.extend(
        "    " + click.style(f"{name}@{version}", fg="green")
        for name, version in deps.items()
    )
    lines.append("")
    return lines


def render_packages(snapshot: Snapshot, *, before: bool) -> str:
    """Full listing of a snapshot, printed with the ``show`` flag."""
    label = "Packages BEFORE install" if before else "Packages AFTER install"
    lines: list[str] = []
    if not before:
        lines.append(border())
    lines.append(click.style(f"📦 {label}\n", fg="bright_blue", bold=True))

    if snapshot.is_empty:
        lines.append(_gray("📦 No packages found"))
    else:
        for category in DependencyCategory:
            lines.extend(_render_category(category, snapshot.category(category)))

    if before:
        lines.append(border() + "\n")
    return "\n".join(lines)


# --- Summary ---


def name_width(diff: SnapshotDiff) -> int:
    """Column width for package names: longest displayed name plus a margin."""
    names = diff.displayed_names()
    if not names:
        return NAME_MARGIN
    return max(len(n) for n in names) + NAME_MARGIN


def format_entry(entry: PackageDiff, width: int) -> str:
    """Format one diff entry with its name padded to *width*."""
    name = entry.name.ljust(width)
    if entry.status == DiffStatus.INSTALLED:
        return click.style(name, fg="white") + click.style(entry.after_version or "", fg="green")
    if entry.status == DiffStatus.REMOVED:
        return click.style(name, fg="white") + click.style(entry.before_version or "", fg="red")
    if entry.status == DiffStatus.UPDATED:
        return (
            click.style(name, fg="white")
            + _gray(entry.before_version or "")
            + " " + _dim(" → ") + " "
            + click.style(entry.after_version or "", fg="yellow")
        )
    return _dim(name) + _dim(entry.before_version or "")


def _render_category_list(label: str, items: list[str]) -> str:
    if not items:
        return ""
    return _gray(f"     {label}:\n") + "\n".join(f"       {item}" for item in items) + "\n"


def render_section(
    title: str,
    color: Callable[[str], str],
    deps: list[str],
    dev_deps: list[str],
) -> str:
    """One status section. Empty when neither category has entries."""
    if not deps and not dev_deps:
        return ""
    out = f"  {color(title)}\n"
    out += _render_category_list(DependencyCategory.DEPENDENCIES.value, deps)
    out += _render_category_list(DependencyCategory.DEV_DEPENDENCIES.value, dev_deps)
    return out


def render_summary(diff: SnapshotDiff) -> str:
    """Grouped summary of installed, updated and removed packages."""
    width = name_width(diff)
    title = click.style("  wtpack  ", fg="bright_blue", bold=True) + _gray(" Summary")
    lines = [border(), title]

    sections: list[str] = []
    for status, label, fg in SUMMARY_SECTIONS:
        section = render_section(
            label,
            lambda s, fg=fg: click.style(s, fg=fg),
            [format_entry(d, width) for d in diff.by_status(status, DependencyCategory.DEPENDENCIES)],
            [format_entry(d, width) for d in diff.by_status(status, DependencyCategory.DEV_DEPENDENCIES)],
        )
        if section:
            sections.append(section)

    if sections:
        lines.append("\n" + "\n".join(sections))
    else:
        lines.append(click.style(f"\n    {NOTHING_CHANGED}", fg="bright_blue"))

    lines.append(border() + "\n")
    return "\n".join(lines)
