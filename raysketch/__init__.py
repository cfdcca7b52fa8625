"""Render spheres by ray tracing, save and load PPM images, and browse scenes interactively."""

__version__ = "0.1.0"
__all__ = ["__version__"]