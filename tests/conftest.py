"""
Pytest configuration and shared fixtures for the client generator.

Provides:
- Settings built from defaults (bundled resources directory)
- A Toolchain that never touches the real PATH
- A minimal OpenAPI spec on disk
- FakeContainerRuntime: stands in for `docker run` of the generator and yq,
  writing the manifests the real generator would produce
"""

from __future__ import annotations

import json
import logging
import re
import subprocess
import sys
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402 (import after path setup)

from clientgen.core.config import Settings  # noqa: E402
from clientgen.services.generator import LOCAL_MOUNT, YQ_WORKDIR  # noqa: E402
from clientgen.services.toolchain import Toolchain  # noqa: E402

SPEC_DESCRIPTION = "Manage SingleStore workspaces, workspace groups and billing."

MINIMAL_SPEC = f"""openapi: 3.0.3
info:
  title: SingleStore Management API
  version: 1.0.0
  description: {SPEC_DESCRIPTION}
paths: {{}}
"""

GENERATED_COMPOSER = {
    "name": "singlestore/management-api",
    "description": "SingleStore Management API client",
    "keywords": ["openapitools", "openapi-generator", "php", "sdk", "rest", "api"],
    "homepage": "https://openapi-generator.tech",
    "license": "unlicense",
    "authors": [
        {"name": "OpenAPI", "homepage": "https://openapi-generator.tech"},
    ],
    "require": {"php": "^7.4 || ^8.0", "ext-json": "*"},
}

GENERATED_PACKAGE = {
    "name": "@singlestore/management-api",
    "version": "1.0.0",
    "description": "JS API client generated by OpenAPI Generator",
    "license": "Unlicense",
    "main": "dist/index.js",
}


class FakeContainerRuntime:
    """
    Replacement for subprocess.run that understands our two containers.

    Generator runs write composer.json or package.json into the directory
    mounted at /local. yq runs print the spec's info.description.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.generator_exit_code = 0
        self.yq_exit_code = 0
        self.yq_output: str | None = None

    @staticmethod
    def _mounted_dir(args: list[str], mount: str) -> Path:
        for i, arg in enumerate(args):
            if arg == "-v" and args[i + 1].endswith(f":{mount}"):
                return Path(args[i + 1][: -len(f":{mount}")])
        raise AssertionError(f"no volume mounted at {mount}: {args}")

    def __call__(self, args, capture_output=False, text=False, **kwargs):
        args = list(args)
        self.calls.append(args)

        if "generate" in args:
            if self.generator_exit_code:
                return subprocess.CompletedProcess(
                    args, self.generator_exit_code, "", "generation failed"
                )
            output_dir = self._mounted_dir(args, LOCAL_MOUNT)
            generator = args[args.index("-g") + 1]
            if generator == "php":
                manifest, content = "composer.json", GENERATED_COMPOSER
            else:
                manifest, content = "package.json", GENERATED_PACKAGE
            (output_dir / manifest).write_text(json.dumps(content, indent=4))
            return subprocess.CompletedProcess(args, 0, "", "")

        if ".info.description" in args:
            if self.yq_exit_code:
                return subprocess.CompletedProcess(args, self.yq_exit_code, "", "yq error")
            if self.yq_output is not None:
                return subprocess.CompletedProcess(args, 0, self.yq_output, "")
            spec = (self._mounted_dir(args, YQ_WORKDIR) / args[-1]).read_text()
            match = re.search(r"^  description: (.*)$", spec, re.MULTILINE)
            return subprocess.CompletedProcess(
                args, 0, f"{match.group(1) if match else 'null'}\n", ""
            )

        return subprocess.CompletedProcess(args, 0, "", "")

    @property
    def generator_calls(self) -> list[list[str]]:
        return [call for call in self.calls if "generate" in call]

    @property
    def yq_calls(self) -> list[list[str]]:
        return [call for call in self.calls if ".info.description" in call]


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None, None, None]:
    """Undo configure_logging() calls made by a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def toolchain() -> Toolchain:
    return Toolchain(container_runtime="/usr/bin/docker", uid=1000, gid=1000)


@pytest.fixture
def spec_file(tmp_path: Path) -> Path:
    path = tmp_path / "spec.yaml"
    path.write_text(MINIMAL_SPEC)
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def fake_runtime() -> Generator[FakeContainerRuntime, None, None]:
    runtime = FakeContainerRuntime()
    with patch("clientgen.core.runner.subprocess.run", side_effect=runtime):
        yield runtime
