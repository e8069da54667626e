"""Text blocks and sparse consoles for CP437 character grids."""

__version__ = "0.1.0"
__all__ = ["sparse_console", "textblock"]