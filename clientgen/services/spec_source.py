"""
OpenAPI spec acquisition.

The spec is either downloaded from a running API (``-h HOST``) or copied
from disk (``-f PATH``). In both cases it lands verbatim at
``<output dir>/openapi3.yaml`` where the generator container reads it.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import httpx

from clientgen.core.config import SPEC_FILENAME, Settings
from clientgen.core.errors import SpecAcquisitionError
from clientgen.core.observability import get_logger
from clientgen.domain.enums import SourceKind

logger = get_logger(__name__)


def spec_url(host: str, endpoint: str) -> str:
    """
    Build the spec download URL for a host.

    Args:
        host: ``HOST[:PORT]``, optionally with a scheme
        endpoint: Path of the spec endpoint (e.g. "/api/v1/spec")

    Returns:
        Absolute URL; ``http://`` is assumed when no scheme is given
    """
    base = host if "://" in host else f"http://{host}"
    return f"{base.rstrip('/')}{endpoint}"


def fetch_spec(
    host: str,
    destination: Path,
    settings: Settings,
    client: httpx.Client | None = None,
) -> Path:
    """
    Download the spec with a single GET and store the body verbatim.

    Args:
        host: ``HOST[:PORT]`` of the API serving the spec
        destination: File to write
        settings: Generator settings (endpoint, timeout)
        client: Optional preconfigured client (tests inject a mock transport)

    Raises:
        SpecAcquisitionError: On transport errors or a non-2xx response
    """
    url = spec_url(host, settings.spec_endpoint)
    logger.info(f"Downloading spec from {url}")

    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=settings.http_timeout_seconds, follow_redirects=False)
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecAcquisitionError(
            f"failed to download spec from {url}: HTTP {exc.response.status_code}",
            details={"url": url, "status_code": exc.response.status_code},
        ) from exc
    except httpx.HTTPError as exc:
        raise SpecAcquisitionError(
            f"failed to download spec from {url}: {exc}", details={"url": url}
        ) from exc
    finally:
        if owns_client:
            client.close()

    try:
        destination.write_bytes(response.content)
    except OSError as exc:
        raise SpecAcquisitionError(
            f"failed to write spec to {destination}: {exc.strerror or exc}",
            details={"path": str(destination)},
        ) from exc

    logger.info(f"Saved spec to {destination} ({len(response.content)} bytes)")
    return destination


def copy_spec(source: Path, destination: Path) -> Path:
    """
    Copy a local spec file byte-for-byte.

    Raises:
        SpecAcquisitionError: If the source is missing or unreadable
    """
    logger.info(f"Copying spec from {source}")
    try:
        shutil.copyfile(source, destination)
    except shutil.SameFileError:
        logger.info(f"Spec already in place at {destination}")
    except OSError as exc:
        raise SpecAcquisitionError(
            f"failed to copy spec {source}: {exc.strerror or exc}",
            details={"path": str(source)},
        ) from exc
    return destination


def acquire_spec(
    source_kind: SourceKind,
    source: str,
    output_dir: Path,
    settings: Settings,
) -> Path:
    """Place the spec at ``<output_dir>/openapi3.yaml`` from the selected source."""
    destination = output_dir / SPEC_FILENAME
    if source_kind is SourceKind.HOST:
        return fetch_spec(source, destination, settings)
    return copy_spec(Path(source).expanduser(), destination)
