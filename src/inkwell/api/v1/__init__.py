# src/inkwell/api/v1/__init__.py
"""Version 1 of the Inkwell HTTP API."""

from .router import api_v1

__all__ = ["api_v1"]
