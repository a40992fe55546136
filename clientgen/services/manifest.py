"""
Post-generation manifest patches.

Each key assignment is its own read-transform-write: the new document is
written to a temp file next to the manifest and moved over it with
``os.replace``. The temp file is removed whatever happens.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

from clientgen.core.config import Settings
from clientgen.core.errors import ManifestPatchError
from clientgen.core.observability import get_logger
from clientgen.services.generator import query_spec_description
from clientgen.services.toolchain import Toolchain

logger = get_logger(__name__)

COMPOSER_MANIFEST = "composer.json"
PACKAGE_MANIFEST = "package.json"

# composer.json uses 4-space indentation, package.json 2
COMPOSER_INDENT = 4
PACKAGE_INDENT = 2


def _load_json(path: Path) -> dict[str, Any]:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestPatchError(
            f"manifest not found: {path}", details={"path": str(path)}
        ) from exc
    except OSError as exc:
        raise ManifestPatchError(
            f"failed to read {path}: {exc.strerror or exc}", details={"path": str(path)}
        ) from exc
    except json.JSONDecodeError as exc:
        raise ManifestPatchError(
            f"{path} is not valid JSON: {exc.msg} (line {exc.lineno})",
            details={"path": str(path)},
        ) from exc
    if not isinstance(document, dict):
        raise ManifestPatchError(
            f"{path} must contain a JSON object", details={"path": str(path)}
        )
    return document


def atomic_update_json(
    path: Path,
    transform: Callable[[dict[str, Any]], dict[str, Any]],
    indent: int = 2,
) -> dict[str, Any]:
    """
    Apply transform to a JSON file via temp file and replace.

    Args:
        path: JSON file to update in place
        transform: Receives the parsed document, returns the new one
        indent: Output indentation

    Returns:
        The written document

    Raises:
        ManifestPatchError: If the file is missing, invalid, or cannot be written
    """
    document = transform(_load_json(path))

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=indent, ensure_ascii=False)
            f.write("\n")
        # mkstemp creates 0600 files; keep the mode the generator gave the manifest
        os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp_path, path)
    except OSError as exc:
        raise ManifestPatchError(
            f"failed to write {path}: {exc.strerror or exc}", details={"path": str(path)}
        ) from exc
    finally:
        tmp_path.unlink(missing_ok=True)

    return document


def set_key(path: Path, key: str, value: Any, indent: int = 2) -> dict[str, Any]:
    """Assign a top-level key in a JSON file."""

    def _assign(document: dict[str, Any]) -> dict[str, Any]:
        document[key] = value
        return document

    logger.info(f"Setting {key} in {path.name}")
    return atomic_update_json(path, _assign, indent=indent)


def prepend_author(path: Path, author: dict[str, str], indent: int = 4) -> dict[str, Any]:
    """Insert author at the front of the authors list, keeping existing entries."""

    def _prepend(document: dict[str, Any]) -> dict[str, Any]:
        authors = document.get("authors") or []
        if not isinstance(authors, list):
            raise ManifestPatchError(
                f"{path.name}: authors must be a list", details={"path": str(path)}
            )
        document["authors"] = [author, *authors]
        return document

    logger.info(f"Prepending author {author.get('name')} in {path.name}")
    return atomic_update_json(path, _prepend, indent=indent)


def patch_composer_manifest(output_dir: Path, settings: Settings, toolchain: Toolchain) -> None:
    """Set license and homepage in composer.json and put our author entry first."""
    manifest = output_dir / COMPOSER_MANIFEST
    set_key(manifest, "license", settings.license_id, indent=COMPOSER_INDENT)
    set_key(manifest, "homepage", settings.homepage, indent=COMPOSER_INDENT)
    prepend_author(manifest, settings.author_entry, indent=COMPOSER_INDENT)


def patch_package_manifest(output_dir: Path, settings: Settings, toolchain: Toolchain) -> None:
    """Copy the spec's info.description into package.json."""
    description = query_spec_description(toolchain, settings, output_dir)
    set_key(output_dir / PACKAGE_MANIFEST, "description", description, indent=PACKAGE_INDENT)
