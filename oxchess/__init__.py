"""Two-player drag-and-drop chess on a graph-based board, drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]