"""Reading and validation of .cub scene files and their XPM textures."""

__version__ = "0.1.0"
__all__ = ["colors", "xpm", "mapcheck", "parser"]