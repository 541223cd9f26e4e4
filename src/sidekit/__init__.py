"""Aggregate rule kits and generate instruction files for AI coding agents."""

from sidekit.version import __version__

__all__ = ["__version__"]
