"""Directory listing in columns with file-type icons and colours."""

__version__ = "1.0.0"
__all__ = ["__version__"]