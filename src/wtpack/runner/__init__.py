"""Install runner for wrapped package manager commands."""

from wtpack.runner.installer import NpmInstaller, resolve_executable

__all__ = [
    "NpmInstaller",
    "resolve_executable",
]
