"""API routes package."""

from . import blueprint, exam, health

__all__ = ["blueprint", "exam", "health"]
