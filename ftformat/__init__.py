"""A minimal printf-style formatter with a fixed set of conversions and its digit helpers."""

__version__ = "0.1.0"
__all__ = ["digits", "formatter"]