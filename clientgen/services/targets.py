"""
Per-language generation table.

Each supported language maps to the generator it uses, its static inputs
under the resources directory, and the manifest patch applied afterwards.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from clientgen.core.config import Settings
from clientgen.domain.enums import TargetLanguage
from clientgen.services.manifest import (
    COMPOSER_MANIFEST,
    PACKAGE_MANIFEST,
    patch_composer_manifest,
    patch_package_manifest,
)
from clientgen.services.toolchain import Toolchain

PatchFn = Callable[[Path, Settings, Toolchain], None]


@dataclass(frozen=True)
class Target:
    """Static description of one client language."""

    language: TargetLanguage
    generator: str
    example_file: str
    manifest: str
    patch: PatchFn

    def config_file(self, settings: Settings) -> Path:
        return settings.resources_dir / "config" / f"{self.language.value}.yaml"

    def template_dir(self, settings: Settings) -> Path:
        return settings.resources_dir / "templates" / self.language.value

    def example_path(self, settings: Settings) -> Path:
        return settings.resources_dir / "examples" / self.example_file

    def additional_properties(self, settings: Settings) -> dict[str, str]:
        """Naming parameters passed on the generator command line."""
        if self.language is TargetLanguage.PHP:
            return {"invokerPackage": settings.invoker_package}
        return {"projectName": settings.project_name}


TARGETS: dict[TargetLanguage, Target] = {
    TargetLanguage.JS: Target(
        language=TargetLanguage.JS,
        generator="javascript",
        example_file="example.js",
        manifest=PACKAGE_MANIFEST,
        patch=patch_package_manifest,
    ),
    TargetLanguage.PHP: Target(
        language=TargetLanguage.PHP,
        generator="php",
        example_file="example.php",
        manifest=COMPOSER_MANIFEST,
        patch=patch_composer_manifest,
    ),
}


def get_target(language: TargetLanguage) -> Target:
    return TARGETS[language]
