"""Web API for asana-flow."""

from .app import create_app

__all__ = ["create_app"]
