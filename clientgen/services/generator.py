"""
Container invocations: OpenAPI Generator and yq.

Both tools run as throwaway containers through the resolved container
runtime, as the invoking user so generated files keep the caller's
ownership.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from clientgen.core.config import SPEC_FILENAME, Settings
from clientgen.core.errors import ManifestPatchError
from clientgen.core.observability import get_logger
from clientgen.core.runner import run
from clientgen.services.toolchain import Toolchain

if TYPE_CHECKING:
    from clientgen.services.targets import Target

logger = get_logger(__name__)

# Mount points inside the generator container
LOCAL_MOUNT = "/local"
RESOURCES_MOUNT = "/resources"

# Working directory of the yq image
YQ_WORKDIR = "/workdir"

DESCRIPTION_QUERY = ".info.description"


def _relative_to_resources(path: Path, settings: Settings) -> str:
    return f"{RESOURCES_MOUNT}/{path.relative_to(settings.resources_dir).as_posix()}"


def build_generator_command(
    toolchain: Toolchain,
    settings: Settings,
    target: Target,
    output_dir: Path,
) -> list[str]:
    """
    Build the ``docker run`` command for OpenAPI Generator.

    The output directory is mounted read-write at /local (the spec is
    already there), the resources directory read-only at /resources.
    """
    additional_properties = ",".join(
        f"{key}={value}" for key, value in target.additional_properties(settings).items()
    )
    return [
        toolchain.container_runtime,
        "run",
        "--rm",
        "--user",
        toolchain.user_spec,
        "-v",
        f"{output_dir}:{LOCAL_MOUNT}",
        "-v",
        f"{settings.resources_dir}:{RESOURCES_MOUNT}:ro",
        settings.generator_image,
        "generate",
        "-i",
        f"{LOCAL_MOUNT}/{SPEC_FILENAME}",
        "-g",
        target.generator,
        "-c",
        _relative_to_resources(target.config_file(settings), settings),
        "-o",
        LOCAL_MOUNT,
        "-t",
        _relative_to_resources(target.template_dir(settings), settings),
        "--package-name",
        settings.package_name,
        "--additional-properties",
        additional_properties,
    ]


def run_generator(
    toolchain: Toolchain,
    settings: Settings,
    target: Target,
    output_dir: Path,
) -> None:
    """
    Generate the client into output_dir.

    Raises:
        CommandFailedError: If the generator exits non-zero
    """
    cmd = build_generator_command(toolchain, settings, target, output_dir)
    logger.info(f"Running {target.generator} generator ({settings.generator_image})")
    run(cmd, description="openapi-generator")
    logger.info(f"Generated {target.language.value} client in {output_dir}")


def build_yq_command(toolchain: Toolchain, settings: Settings, output_dir: Path) -> list[str]:
    """Build the ``docker run`` command that prints the spec's info.description."""
    return [
        toolchain.container_runtime,
        "run",
        "--rm",
        "--user",
        toolchain.user_spec,
        "-v",
        f"{output_dir}:{YQ_WORKDIR}",
        settings.yq_image,
        DESCRIPTION_QUERY,
        SPEC_FILENAME,
    ]


def query_spec_description(toolchain: Toolchain, settings: Settings, output_dir: Path) -> str:
    """
    Read ``info.description`` from the copied spec with yq.

    Raises:
        CommandFailedError: If yq exits non-zero
        ManifestPatchError: If the spec has no description
    """
    result = run(
        build_yq_command(toolchain, settings, output_dir),
        capture=True,
        description="yq",
    )
    description = result.stdout.rstrip("\n")
    if not description.strip() or description == "null":
        raise ManifestPatchError(
            f"{SPEC_FILENAME} has no {DESCRIPTION_QUERY}",
            details={"path": str(output_dir / SPEC_FILENAME)},
        )
    return description
