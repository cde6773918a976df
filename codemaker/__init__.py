"""Generate Python source files from structured data."""

__version__ = "0.1.0"
