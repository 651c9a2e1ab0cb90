"""API layer package exposing the demo service application factory."""

from .application import create_api_application

__all__ = ["create_api_application"]
