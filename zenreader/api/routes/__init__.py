"""API route modules."""

from . import health, reader

__all__ = ["health", "reader"]
