"""Vector and matrix math, wireframe sphere and grid lines, and a pygame viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]