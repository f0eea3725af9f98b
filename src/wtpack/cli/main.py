"""wtpack CLI — runs npm install and summarizes dependency changes.

Usage:
    wtpack [npm install args...] [--wtpack-FLAG ...]

Every argument is forwarded to ``npm install`` except ``install``/``i``/``add``
(dropped, the install verb is implied) and arguments starting with
``--wtpack-``, which configure wtpack itself:

    --wtpack-show             Print full package listings before and after
    --wtpack-config=PATH      Use an explicit wtpack.yaml
    --wtpack-lockfile=PATH    Read a lockfile other than ./package-lock.json
    --wtpack-version          Print the version and exit

Arguments after a literal ``--`` are passed to npm as-is, ``--`` included.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

import click
import yaml

from wtpack import __version__
from wtpack.config import WtpackConfig, load_config
from wtpack.diff.differ import diff_snapshots
from wtpack.lockfile.reader import LOCKFILE_NAME, LockfileError, read_snapshot
from wtpack.models import Snapshot
from wtpack.report.presenter import (
    render_header,
    render_install_command,
    render_install_failure,
    render_missing_lockfile,
    render_packages,
    render_summary,
)
from wtpack.runner.installer import NpmInstaller

FLAG_PREFIX = "--wtpack-"
INSTALL_VERBS = ("install", "i", "add")
END_OF_FLAGS = "--"
RAW_ARGS_KEY = "wtpack.raw_args"

KNOWN_FLAGS = ("show", "version")
KNOWN_OPTIONS = ("config", "lockfile")


@dataclass
class ParsedArgs:
    """Command line split into npm arguments and wtpack's own flags."""

    npm_args: list[str] = field(default_factory=list)
    flags: list[str] = field(default_factory=list)
    options: dict[str, str] = field(default_factory=dict)
    unknown: list[str] = field(default_factory=list)


def split_args(args: list[str]) -> ParsedArgs:
    """Separate pass-through npm arguments from ``--wtpack-`` flags.

    Everything from a literal ``--`` onwards goes to npm untouched.
    """
    parsed = ParsedArgs()
    for i, arg in enumerate(args):
        if arg == END_OF_FLAGS:
            parsed.npm_args.extend(args[i:])
            break
        if arg in INSTALL_VERBS:
            continue
        if not arg.startswith(FLAG_PREFIX):
            parsed.npm_args.append(arg)
            continue

        name, sep, value = arg[len(FLAG_PREFIX):].partition("=")
        if not sep and name in KNOWN_FLAGS:
            parsed.flags.append(name)
        elif sep and value and name in KNOWN_OPTIONS:
            parsed.options[name] = value
        else:
            parsed.unknown.append(arg)
    return parsed


def _load_cfg(explicit: str | None) -> WtpackConfig:
    try:
        return load_config(explicit)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)


def _read(lockfile: Path) -> Snapshot:
    try:
        return read_snapshot(lockfile)
    except LockfileError as e:
        click.echo(click.style("ERROR", fg="red") + f"  {e}", err=True)
        sys.exit(1)


class PassThroughCommand(click.Command):
    """Command that keeps its raw argument list, ``--`` included."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=PassThroughCommand,
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": ["--wtpack-help"],
    },
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """wtpack: What the Pack? Runs npm install and shows what changed."""
    # click drops a literal "--" from args, so split the raw list instead
    parsed = split_args(ctx.meta.get(RAW_ARGS_KEY, list(args)))

    if "version" in parsed.flags:
        click.echo(f"wtpack, version {__version__}")
        return

    for arg in parsed.unknown:
        click.echo(f"Warning: ignoring unknown wtpack flag: {arg}", err=True)

    cfg = _load_cfg(parsed.options.get("config"))
    lockfile = Path(parsed.options.get("lockfile") or cfg.lockfile or LOCKFILE_NAME)
    show = "show" in parsed.flags or cfg.show
    installer = NpmInstaller(cfg.command)

    click.echo(render_header())

    if not lockfile.is_file():
        click.echo(render_missing_lockfile(lockfile.name))
    before = _read(lockfile)
    if show:
        click.echo(render_packages(before, before=True))

    click.echo(render_install_command(installer.command, parsed.npm_args))
    result = installer.run(parsed.npm_args)
    if not result.succeeded:
        click.echo(render_install_failure(result, installer.command), err=True)
        sys.exit(result.returncode)

    after = _read(lockfile)
    if show:
        click.echo(render_packages(after, before=False))

    click.echo(render_summary(diff_snapshots(before, after)))
