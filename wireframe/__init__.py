"""Render height maps as wireframe images with 4x4 matrix transforms and Bresenham lines."""

__version__ = "0.1.0"
__all__ = ["__version__"]