"""DevOps Demo API Service."""

from .app import create_api_app

__all__ = ["create_api_app"]
