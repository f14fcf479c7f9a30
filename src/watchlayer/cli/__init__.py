"""
CLI commands for watchlayer.
"""

from watchlayer.cli.discover import discover_command

__all__ = [
    "discover_command",
]
