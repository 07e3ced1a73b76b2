"""Wireframe viewer for .fdf height maps, with XPM, colour-name and event-hook helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]