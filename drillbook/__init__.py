"""Number drills and printable text patterns of squares, triangles and shapes."""

__version__ = "0.1.0"

__all__ = ["__version__"]