"""
Domain-specific exceptions for the client generator.

Every failure in the pipeline is one of these. The CLI maps them to
process exit codes via ``get_exit_code``.
"""

from typing import Any


class ClientGenError(Exception):
    """Base exception for all client generator errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UsageError(ClientGenError):
    """
    Raised when the command line is malformed.

    Examples:
    - Wrong number of positional arguments
    - Neither or both of -f / -h given

    Exit code: 2
    """

    pass


class MissingDependencyError(ClientGenError):
    """
    Raised when a required external program is not on PATH.

    Examples:
    - docker (or the configured container runtime) not installed

    Exit code: 127
    """

    def __init__(self, program: str, details: dict[str, Any] | None = None):
        self.program = program
        super().__init__(f"required program not found: {program}", details)


class UnsupportedLanguageError(ClientGenError):
    """
    Raised when the requested target language is not supported.

    Exit code: 1
    """

    pass


class SpecAcquisitionError(ClientGenError):
    """
    Raised when the OpenAPI spec cannot be downloaded or copied.

    Examples:
    - Host unreachable or non-2xx response
    - Source file missing or unreadable

    Exit code: 1
    """

    pass


class FileOperationError(ClientGenError):
    """
    Raised when a filesystem step fails.

    Examples:
    - Output directory cannot be created
    - Supplemental file missing from the resources directory

    Exit code: 1
    """

    pass


class CommandFailedError(ClientGenError):
    """
    Raised when an external command exits non-zero.

    The command's exit code is kept and propagated as the process exit code.
    """

    def __init__(
        self,
        message: str,
        exit_code: int,
        details: dict[str, Any] | None = None,
    ):
        self.exit_code = exit_code
        super().__init__(message, details)


class ManifestPatchError(ClientGenError):
    """
    Raised when a generated manifest cannot be patched.

    Examples:
    - composer.json / package.json missing after generation
    - Manifest is not valid JSON
    - Spec has no info.description to copy

    Exit code: 1
    """

    pass


# Process exit code mapping
ERROR_EXIT_MAP = {
    UsageError: 2,
    MissingDependencyError: 127,
    UnsupportedLanguageError: 1,
    SpecAcquisitionError: 1,
    FileOperationError: 1,
    ManifestPatchError: 1,
}


def get_exit_code(error: Exception) -> int:
    """
    Get the process exit code for a given exception.

    Args:
        error: The exception instance

    Returns:
        Exit code (the failing command's own code for CommandFailedError,
        1 for unknown errors)
    """
    if isinstance(error, CommandFailedError):
        return error.exit_code or 1
    return ERROR_EXIT_MAP.get(type(error), 1)
