"""
Shared external command runner.

Every external program the generator calls goes through ``run`` so that
logging and exit-code handling stay consistent.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from clientgen.core.errors import CommandFailedError
from clientgen.core.observability import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run(
    cmd: Sequence[str],
    *,
    capture: bool = False,
    description: str | None = None,
) -> CommandResult:
    """
    Run an external command and fail on a non-zero exit.

    Args:
        cmd: Command and arguments to execute
        capture: Capture stdout/stderr instead of streaming them
        description: Human-readable step name used in the error message

    Returns:
        CommandResult for a successful run

    Raises:
        CommandFailedError: If the command exits non-zero or cannot be started

    Example:
        >>> run(["docker", "version"], capture=True)
    """
    args = tuple(str(part) for part in cmd)
    label = description or args[0]
    logger.debug(f"  > {' '.join(args)}")

    try:
        completed = subprocess.run(args, capture_output=capture, text=True)
    except OSError as exc:
        raise CommandFailedError(
            f"{label} could not be started: {exc}", exit_code=127, details={"command": list(args)}
        ) from exc

    result = CommandResult(
        args=args,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    if not result.ok:
        message = f"{label} failed with exit code {result.returncode}"
        if result.stderr.strip():
            message = f"{message}: {result.stderr.strip()}"
        # Killed by signal N is reported as -N; use the shell convention instead
        exit_code = result.returncode if result.returncode > 0 else 128 - result.returncode
        raise CommandFailedError(message, exit_code=exit_code, details={"command": list(args)})
    return result
