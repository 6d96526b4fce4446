"""Task list kept in memory and mirrored to a key-value store."""

__version__ = "0.1.0"
