"""Generator configuration using Pydantic Settings.

All values come from environment variables prefixed with ``CLIENTGEN_``.

Optionally, you may point `ENV_FILE` at a local env file (for development).
Leave it unset in CI so the environment stays the single source of truth.
"""

import logging
import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"

SPEC_FILENAME = "openapi3.yaml"


class Settings(BaseSettings):
    """
    Generator settings with type validation.

    Defaults describe the SingleStore Management API clients; every value
    can be overridden through the environment.
    """

    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE") or None, env_prefix="CLIENTGEN_", extra="ignore"
    )

    # Logging
    log_level: str = "INFO"
    structured_logs: bool = False

    # External tooling
    container_runtime: str = "docker"
    generator_image: str = "openapitools/openapi-generator-cli:v7.6.0"
    yq_image: str = "mikefarah/yq:4"

    # Static inputs: generator configs, templates, examples, LICENSE, CONTRIBUTING.md
    resources_dir: Path = RESOURCES_DIR

    # Spec download
    spec_endpoint: str = "/api/v1/spec"
    http_timeout_seconds: float = Field(default=30.0, gt=0)

    # Package naming passed to the generator
    package_name: str = "singlestore-management-api"
    invoker_package: str = "SingleStore\\ManagementAPI"
    project_name: str = "@singlestore/management-api"

    # Manifest patch values
    license_id: str = "Apache-2.0"
    homepage: str = "https://singlestore.com"
    author_name: str = "SingleStore"
    author_email: str = "support@singlestore.com"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level and reject unknown names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a standard logging level, got '{v}'")
        return level

    @field_validator("resources_dir")
    @classmethod
    def validate_resources_dir(cls, v: Path) -> Path:
        """The resources directory must exist; it is mounted into the generator."""
        path = Path(v).expanduser().resolve()
        if not path.is_dir():
            raise ValueError(f"resources_dir does not exist: {path}")
        return path

    @field_validator("spec_endpoint")
    @classmethod
    def validate_spec_endpoint(cls, v: str) -> str:
        return v if v.startswith("/") else f"/{v}"

    @property
    def author_entry(self) -> dict[str, str]:
        """Authors entry prepended to composer.json."""
        return {
            "name": self.author_name,
            "email": self.author_email,
            "homepage": self.homepage,
        }


settings = Settings()
