"""A printf-style formatter with C-like integer widths and extra conversions."""

__version__ = "0.1.0"

__all__ = ["bits", "text", "integers", "radix", "specifiers", "formatter", "cli"]