"""Character checks, number conversions, buffered line reading and printf-style output."""

__version__ = "0.1.0"
__all__ = ["chars", "conversions", "linereader", "dprintf"]