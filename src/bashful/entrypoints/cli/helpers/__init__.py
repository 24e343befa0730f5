"""CLI helpers for BASHFUL.

Message emitters that write to stderr with emoji→ASCII fallbacks, and the
Click callback parsing per-logger level overrides.
"""

from .log_level_parser import parse_log_level
from .messages import error, warn

__all__ = ["error", "warn", "parse_log_level"]
