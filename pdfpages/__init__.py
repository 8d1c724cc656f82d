"""Remove, extract and merge PDF pages locally."""

__version__ = "0.1.0"
