"""DevOps Demo API HTTP client."""

from .client import DemoApiClient

__all__ = ["DemoApiClient"]
