"""Unit tests for supplemental file copying."""

import shutil

import pytest

from clientgen.core.config import Settings
from clientgen.core.errors import FileOperationError
from clientgen.domain.enums import TargetLanguage
from clientgen.services.supplemental import copy_supplemental_files, supplemental_sources
from clientgen.services.targets import get_target


class TestSupplementalFiles:
    @pytest.mark.parametrize(
        ("language", "example"),
        [(TargetLanguage.PHP, "example.php"), (TargetLanguage.JS, "example.js")],
    )
    def test_copies_example_and_docs(self, settings, output_dir, language, example):
        copied = copy_supplemental_files(get_target(language), settings, output_dir)

        assert sorted(p.name for p in copied) == sorted([example, "CONTRIBUTING.md", "LICENSE"])
        for path in copied:
            source = (
                settings.resources_dir / "examples" / path.name
                if path.name == example
                else settings.resources_dir / path.name
            )
            assert path.read_bytes() == source.read_bytes()

    def test_missing_file_raises(self, tmp_path, output_dir):
        resources = tmp_path / "resources"
        shutil.copytree(Settings().resources_dir, resources)
        (resources / "LICENSE").unlink()
        settings = Settings(resources_dir=resources)

        with pytest.raises(FileOperationError) as exc_info:
            copy_supplemental_files(get_target(TargetLanguage.PHP), settings, output_dir)

        assert "LICENSE" in exc_info.value.message

    def test_sources_listed_example_first(self, settings):
        sources = supplemental_sources(get_target(TargetLanguage.JS), settings)
        assert [p.name for p in sources] == ["example.js", "CONTRIBUTING.md", "LICENSE"]
