"""Parsing of .cub scene files, with XPM texture decoding and colour helpers."""

__version__ = "0.1.0"
__all__ = ["cli", "colors", "config", "reader", "strutil", "visual", "xpm"]