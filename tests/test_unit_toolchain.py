"""Unit tests for external program resolution."""

import os
from unittest.mock import patch

import pytest

from clientgen.core.config import Settings
from clientgen.core.errors import MissingDependencyError
from clientgen.services.toolchain import Toolchain, resolve_toolchain


class TestResolveToolchain:
    def test_resolves_container_runtime(self):
        with patch("clientgen.services.toolchain.shutil.which", return_value="/usr/bin/docker"):
            toolchain = resolve_toolchain(Settings())

        assert toolchain.container_runtime == "/usr/bin/docker"
        assert toolchain.uid == os.getuid()
        assert toolchain.gid == os.getgid()

    def test_uses_configured_runtime(self):
        which_patch = patch("clientgen.services.toolchain.shutil.which", return_value="/bin/podman")
        with which_patch as which:
            resolve_toolchain(Settings(container_runtime="podman"))

        which.assert_called_once_with("podman")

    def test_missing_runtime_names_program(self):
        with patch("clientgen.services.toolchain.shutil.which", return_value=None):
            with pytest.raises(MissingDependencyError) as exc_info:
                resolve_toolchain(Settings())

        assert exc_info.value.program == "docker"
        assert "docker" in exc_info.value.message


def test_user_spec():
    assert Toolchain(container_runtime="docker", uid=501, gid=20).user_spec == "501:20"
