"""Copy static files shipped alongside every generated client."""

from __future__ import annotations

import shutil
from pathlib import Path

from clientgen.core.config import Settings
from clientgen.core.errors import FileOperationError
from clientgen.core.observability import get_logger
from clientgen.services.targets import Target

logger = get_logger(__name__)

COMMON_FILES = ("CONTRIBUTING.md", "LICENSE")


def supplemental_sources(target: Target, settings: Settings) -> list[Path]:
    """Files to copy: the language example plus the shared docs."""
    return [target.example_path(settings)] + [
        settings.resources_dir / name for name in COMMON_FILES
    ]


def copy_supplemental_files(target: Target, settings: Settings, output_dir: Path) -> list[Path]:
    """
    Copy the example, CONTRIBUTING.md and LICENSE into output_dir.

    Returns:
        Paths of the copied files

    Raises:
        FileOperationError: On the first file that cannot be copied
    """
    copied = []
    for source in supplemental_sources(target, settings):
        destination = output_dir / source.name
        try:
            shutil.copyfile(source, destination)
        except OSError as exc:
            raise FileOperationError(
                f"failed to copy {source} to {destination}: {exc.strerror or exc}",
                details={"source": str(source), "destination": str(destination)},
            ) from exc
        logger.debug(f"Copied {source.name}")
        copied.append(destination)

    logger.info(f"Copied {len(copied)} supplemental files")
    return copied
