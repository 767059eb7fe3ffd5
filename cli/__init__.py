"""
CLI module for friendgraph.

The command-line interface providing summary, neighbors, reach and
path commands over edge-list files.
"""

from cli.main import app

__all__ = ["app"]
