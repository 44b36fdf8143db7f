"""Hierarchical console menus built from declarative menu groups."""

from treemenu.__version__ import __version__

__all__ = ["__version__"]
