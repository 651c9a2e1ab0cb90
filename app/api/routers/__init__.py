"""API router package for endpoint composition."""

from .demo import api_create_demo_router

__all__ = ["api_create_demo_router"]
