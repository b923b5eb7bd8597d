"""Load git commits and diffs and format short headers describing them."""

__version__ = "2.9.1"
__all__ = ["__version__"]