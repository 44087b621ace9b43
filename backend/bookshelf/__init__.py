"""Bookshelf: a small HTTP service over a thread-safe in-memory book registry."""

__version__ = "1.0.0"
