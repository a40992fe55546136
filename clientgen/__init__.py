"""OpenAPI client generation for the SingleStore Management API."""

__version__ = "1.0.0"
