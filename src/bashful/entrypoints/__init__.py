"""Entrypoints (inbound adapters) for BASHFUL.

Expose the text filters to the outside world. Entrypoints read the process
environment and standard streams, call into ``bashful.text`` with explicit
arguments, and present the results.
"""
