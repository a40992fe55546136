"""
External program resolution.

Every program the pipeline shells out to is looked up once at startup and
carried in a ``Toolchain`` passed to each step that needs it.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass

from clientgen.core.config import Settings
from clientgen.core.errors import MissingDependencyError
from clientgen.core.observability import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Toolchain:
    """Resolved locations of external programs plus the invoking identity."""

    container_runtime: str
    uid: int
    gid: int

    @property
    def user_spec(self) -> str:
        """``UID:GID`` for ``docker run --user``."""
        return f"{self.uid}:{self.gid}"


def _which(program: str) -> str:
    path = shutil.which(program)
    if path is None:
        raise MissingDependencyError(program)
    return path


def resolve_toolchain(settings: Settings) -> Toolchain:
    """
    Resolve every external program the pipeline needs.

    Args:
        settings: Generator settings (names the container runtime)

    Returns:
        Toolchain with absolute program paths

    Raises:
        MissingDependencyError: If a program is not on PATH
    """
    runtime = _which(settings.container_runtime)
    logger.debug(f"Resolved container runtime: {runtime}")
    return Toolchain(container_runtime=runtime, uid=os.getuid(), gid=os.getgid())
