"""
CLI: Generate a SingleStore API client.

Usage:
    uv run clientgen -f PATH LANG DIR
    uv run clientgen -h HOST[:PORT] LANG DIR

    LANG is one of: js, php
    DIR is created if it does not exist.

Exit Codes:
    0   - Client generated
    1   - Generation failed (unsupported language, I/O error, bad manifest)
    2   - Invalid arguments
    127 - Required external program not found
    N   - The generator's own exit code when it fails
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from clientgen import __version__
from clientgen.core.config import Settings
from clientgen.core.config import settings as default_settings
from clientgen.core.errors import ClientGenError, UsageError, get_exit_code
from clientgen.core.observability import (
    configure_logging,
    generate_run_id,
    get_logger,
    set_run_id,
)
from clientgen.domain.enums import SourceKind, TargetLanguage
from clientgen.pipeline import GenerationRequest, PipelineContext, run_pipeline
from clientgen.services.toolchain import resolve_toolchain

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    # -h selects the host, so help moves to --help only
    parser = _ArgumentParser(
        prog="clientgen",
        description="Generate a SingleStore API client with OpenAPI Generator.",
        add_help=False,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", dest="file", metavar="PATH", help="read the spec from a local file")
    source.add_argument(
        "-h", dest="host", metavar="HOST", help="download the spec from HOST[:PORT]"
    )
    parser.add_argument(
        "language",
        metavar="LANG",
        help=f"target language ({', '.join(lang.value for lang in TargetLanguage)})",
    )
    parser.add_argument("output_dir", metavar="DIR", help="output directory")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="override CLIENTGEN_LOG_LEVEL for this run",
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Sequence[str]) -> tuple[GenerationRequest, argparse.Namespace]:
    """
    Parse the command line into a GenerationRequest.

    Raises:
        UsageError: On a malformed command line
    """
    args = build_parser().parse_args(list(argv))
    if args.file is not None:
        source_kind, source, flag = SourceKind.FILE, args.file, "-f"
    else:
        source_kind, source, flag = SourceKind.HOST, args.host, "-h"
    if not source:
        raise UsageError(f"{flag} requires a non-empty value")

    request = GenerationRequest(
        source_kind=source_kind,
        source=source,
        language=args.language,
        output_dir=args.output_dir,
    )
    return request, args


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """Entry point. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    if settings is None:
        settings = default_settings

    try:
        request, args = parse_args(argv)
    except UsageError as exc:
        build_parser().print_usage(sys.stderr)
        print(f"ERROR: {exc.message}", file=sys.stderr)
        return get_exit_code(exc)

    configure_logging(args.log_level or settings.log_level, structured=settings.structured_logs)
    set_run_id(generate_run_id())

    try:
        toolchain = resolve_toolchain(settings)
        result = run_pipeline(request, PipelineContext(settings=settings, toolchain=toolchain))
    except ClientGenError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"ERROR: {exc.message}", file=sys.stderr)
        return get_exit_code(exc)

    print(f"[OK] {result.language.value} client generated in {result.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
