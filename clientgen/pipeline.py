"""
Client generation pipeline.

Runs the steps of one invocation in order. Each step raises a
``ClientGenError`` subclass on failure and nothing is rolled back: files
written by earlier steps stay in the output directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from clientgen.core.config import Settings
from clientgen.core.errors import FileOperationError
from clientgen.core.observability import get_logger, set_language
from clientgen.domain.enums import SourceKind, TargetLanguage
from clientgen.services.generator import run_generator
from clientgen.services.spec_source import acquire_spec
from clientgen.services.supplemental import copy_supplemental_files
from clientgen.services.targets import get_target
from clientgen.services.toolchain import Toolchain

logger = get_logger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    """A parsed, not yet validated invocation."""

    source_kind: SourceKind
    source: str
    language: str
    output_dir: str


@dataclass(frozen=True)
class PipelineContext:
    """Configuration assembled once at startup."""

    settings: Settings
    toolchain: Toolchain


@dataclass
class GenerationResult:
    language: TargetLanguage
    output_dir: Path
    spec_path: Path
    supplemental_files: list[Path] = field(default_factory=list)


def prepare_output_dir(output_dir: str) -> Path:
    """
    Create the output directory if needed and return its absolute path.

    Raises:
        FileOperationError: If the directory cannot be created
    """
    path = Path(output_dir).expanduser()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileOperationError(
            f"failed to create output directory {path}: {exc.strerror or exc}",
            details={"path": str(path)},
        ) from exc
    return path.resolve()


def run_pipeline(request: GenerationRequest, context: PipelineContext) -> GenerationResult:
    """
    Generate a client for one request.

    Steps: validate language, create output dir, acquire spec, run the
    generator, copy supplemental files, patch the manifest.
    """
    language = TargetLanguage.parse(request.language)
    set_language(language.value)
    target = get_target(language)

    output_dir = prepare_output_dir(request.output_dir)
    logger.info(f"Output directory: {output_dir}")

    spec_path = acquire_spec(request.source_kind, request.source, output_dir, context.settings)

    run_generator(context.toolchain, context.settings, target, output_dir)

    copied = copy_supplemental_files(target, context.settings, output_dir)

    logger.info(f"Patching {target.manifest}")
    target.patch(output_dir, context.settings, context.toolchain)

    return GenerationResult(
        language=language,
        output_dir=output_dir,
        spec_path=spec_path,
        supplemental_files=copied,
    )
