"""
Services package for the client generator.

One module per pipeline step: toolchain resolution, spec acquisition,
generator invocation, supplemental files and manifest patches.
"""

from clientgen.services.toolchain import Toolchain, resolve_toolchain
from clientgen.services.spec_source import acquire_spec
from clientgen.services.targets import TARGETS, Target, get_target

__all__ = [
    "TARGETS",
    "Target",
    "Toolchain",
    "acquire_spec",
    "get_target",
    "resolve_toolchain",
]
