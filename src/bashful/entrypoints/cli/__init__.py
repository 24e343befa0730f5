"""Command-line interface for BASHFUL."""

from .main import bashful

__all__ = ["bashful"]
