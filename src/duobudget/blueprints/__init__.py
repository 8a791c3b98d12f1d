"""Blueprint exports."""

from . import dashboard

__all__ = ["dashboard"]
