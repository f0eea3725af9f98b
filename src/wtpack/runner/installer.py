"""NpmInstaller — runs the package manager's install command via subprocess.

The subprocess inherits the terminal's stdout/stderr so its progress
streams live. Only the exit code is consumed.
"""

from __future__ import annotations

import subprocess
import sys

from wtpack.models import InstallResult

DEFAULT_COMMAND = "npm"

# Exit code reported when the executable cannot be started at all
COMMAND_NOT_FOUND = 127


def resolve_executable(command: str = DEFAULT_COMMAND, platform: str | None = None) -> str:
    """Return the executable to spawn. Windows needs ``npm.cmd`` for a bare ``npm``."""
    platform = platform or sys.platform
    if platform == "win32" and command == "npm":
        return "npm.cmd"
    return command


class NpmInstaller:
    """Runs ``<command> install <args...>`` and waits for it to finish."""

    def __init__(self, command: str = DEFAULT_COMMAND) -> None:
        self._command = command

    @property
    def command(self) -> str:
        return self._command

    def build_args(self, args: list[str]) -> list[str]:
        return [resolve_executable(self._command), "install", *args]

    def run(self, args: list[str]) -> InstallResult:
        cmd = self.build_args(args)
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            return InstallResult(
                command=cmd,
                returncode=COMMAND_NOT_FOUND,
                stderr=str(e),
            )

        # Output streams to the terminal, so only the exit code comes back
        return InstallResult(command=cmd, returncode=result.returncode)
