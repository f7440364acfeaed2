"""
Postline API package.

Provides the FastAPI application for the Postline feed service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
