"""Classic algorithms over lists, matrices and strings."""

__version__ = "0.1.0"
__all__ = ["arrays", "matrix", "partition", "strings"]