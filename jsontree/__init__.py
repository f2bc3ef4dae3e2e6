"""A JSON document tree with building, editing, comparison, copying, minifying and string literal coding."""

__version__ = "1.7.16"
__all__ = ["build", "compare", "item", "minify", "strings"]