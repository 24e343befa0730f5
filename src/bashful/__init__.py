"""BASHFUL

Small, stateless text filters (case conversion, trimming, list handling,
common prefix/suffix, placeholder templating) usable as a Python library or
from the ``bashful`` command line, one subcommand per filter.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
