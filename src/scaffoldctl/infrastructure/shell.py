"""Command execution for package installs and template init tools.

Non-interactive commands run with captured output; a failure is logged and
reported as ``False`` rather than raised. Interactive commands inherit the
terminal's standard streams so tools like ``shadcn init`` can prompt.
Records logged while a command runs carry it as ``command``.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from scaffoldctl.config.logging import command_scope

logger = logging.getLogger(__name__)

# npm failures print long traces; the end is what names the cause.
STDERR_TAIL_LINES = 20


class CommandExecutor(Protocol):
    """Anything that can run a shell command string."""

    def execute(self, command: str, interactive: bool = False) -> bool: ...


def stderr_tail(stderr: str | None, limit: int = STDERR_TAIL_LINES) -> str:
    """Last *limit* non-blank lines of captured stderr."""
    lines = [line for line in (stderr or "").splitlines() if line.strip()]
    return "\n".join(lines[-limit:])


class CommandRunner:
    """Run shell command strings from the project root."""

    def __init__(self, cwd: Path) -> None:
        self._cwd = cwd

    def execute(self, command: str, interactive: bool = False) -> bool:
        """Run *command*, returning True on exit code 0."""
        with command_scope(command):
            logger.debug("Running %s (interactive=%s)", command, interactive)
            try:
                proc = subprocess.run(
                    command,
                    shell=True,
                    cwd=self._cwd,
                    capture_output=not interactive,
                    text=True,
                    check=False,
                )
            except OSError:
                logger.error("Could not start command: %s", command, exc_info=True)
                return False

            if proc.returncode != 0:
                logger.error("Command failed (exit %d): %s", proc.returncode, command)
                tail = "" if interactive else stderr_tail(proc.stderr)
                if tail:
                    logger.error("%s", tail)
                return False
        return True
