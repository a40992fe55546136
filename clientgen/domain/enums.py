"""
Domain enums for generation requests.

These enums give type-safe names to the values accepted on the command line.
"""

from enum import Enum

from clientgen.core.errors import UnsupportedLanguageError


class SourceKind(str, Enum):
    """Where the OpenAPI spec comes from."""

    FILE = "file"  # -f PATH
    HOST = "host"  # -h HOST[:PORT]


class TargetLanguage(str, Enum):
    """Client languages the generator is configured for."""

    JS = "js"
    PHP = "php"

    @classmethod
    def parse(cls, value: str) -> "TargetLanguage":
        """
        Parse a command-line language value.

        Raises:
            UnsupportedLanguageError: If value is not a supported language
        """
        try:
            return cls(value)
        except ValueError:
            supported = ", ".join(lang.value for lang in cls)
            raise UnsupportedLanguageError(
                f"unsupported language '{value}' (supported: {supported})",
                details={"language": value, "supported": [lang.value for lang in cls]},
            ) from None
