"""API routers."""
from bookshelf.routers import books, demo

__all__ = ["books", "demo"]
