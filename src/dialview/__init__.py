"""Interactive four-position dial widget."""
__version__ = "0.1.0"
