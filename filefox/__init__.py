"""A small desktop file explorer: folder browsing, rename, delete and name search."""

__version__ = "0.1.0"
__all__ = ["__version__"]