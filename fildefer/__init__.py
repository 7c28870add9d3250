"""Wireframe viewer for heightmap files, with map parsing, projection and rendering."""

__version__ = "0.1.0"
__all__ = ["__version__"]