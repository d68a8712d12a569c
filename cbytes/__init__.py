"""C-style character classification, byte-buffer and NUL-terminated string routines."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstring"]