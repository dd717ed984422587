"""Lazy rows and sheets built from iterators, with sequence helpers, scanners and SQL matching."""

__version__ = "1.0.0"
__all__ = ["files", "numbers", "row", "scanners", "sequences", "sheet", "sql"]