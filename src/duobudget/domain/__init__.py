"""Domain layer: member view and persistence contracts."""

from .members import Member

__all__ = ["Member"]
