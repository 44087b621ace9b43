"""
Thread-safe in-memory book registry.

All state lives in a dict guarded by a single ``threading.Lock``. Each public
operation runs its whole critical section on a worker thread through
``asyncio.to_thread`` so that waiting on the lock never blocks the event loop.
The lock is acquired and released inside the worker; it is never held across
an ``await``.
"""
import asyncio
import threading
from operator import attrgetter
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from bookshelf.core.exceptions import RegistryWorkerError
from bookshelf.core.logging import get_logger
from bookshelf.models import SEED_BOOKS, Book

logger = get_logger("registry")

T = TypeVar("T")


class BookRegistry:
    """
    Shared store of books keyed by id.

    Not-found outcomes are returned as ``None``/``False``. The only error the
    registry raises is :class:`RegistryWorkerError`, when an offloaded
    operation fails to complete.
    """

    def __init__(self, books: Iterable[Book] = ()):
        self._books: Dict[int, Book] = {book.id: book for book in books}
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "BookRegistry":
        """Build a registry holding the fixed startup books."""
        return cls(SEED_BOOKS)

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    async def _offload(self, operation: str, func: Callable[..., T], *args) -> T:
        try:
            return await asyncio.to_thread(func, *args)
        except Exception as exc:
            logger.exception(f"Worker for {operation} failed")
            raise RegistryWorkerError(operation, exc) from exc

    # Critical sections. Each runs on a worker thread.

    def _list_locked(self) -> List[Book]:
        with self._lock:
            return sorted(self._books.values(), key=attrgetter("title"))

    def _get_locked(self, book_id: int) -> Optional[Book]:
        with self._lock:
            return self._books.get(book_id)

    def _upsert_locked(self, book: Book) -> Book:
        with self._lock:
            self._books[book.id] = book
            return book

    def _replace_locked(self, book: Book) -> Optional[Book]:
        with self._lock:
            if book.id not in self._books:
                return None
            self._books[book.id] = book
            return book

    def _delete_locked(self, book_id: int) -> bool:
        with self._lock:
            return self._books.pop(book_id, None) is not None

    def _count_locked(self) -> int:
        with self._lock:
            return len(self._books)

    # Public API

    async def list_books(self) -> List[Book]:
        """Return every book sorted by title."""
        books = await self._offload("list", self._list_locked)
        logger.debug(f"Listed {len(books)} book(s)")
        return books

    async def get_book(self, book_id: int) -> Optional[Book]:
        """Return the book stored under ``book_id``, or ``None``."""
        book = await self._offload("get", self._get_locked, book_id)
        if book is None:
            logger.debug(f"Book id {book_id} not found")
        return book

    async def upsert_book(self, book: Book) -> Book:
        """Insert ``book`` or replace the one with the same id."""
        stored = await self._offload("upsert", self._upsert_locked, book)
        logger.debug(f"Upserted {stored}")
        return stored

    async def replace_book(self, book: Book) -> Optional[Book]:
        """
        Replace an existing book.

        Returns the stored book, or ``None`` when no book with that id exists.
        The existence check and the write share one lock acquisition.
        """
        stored = await self._offload("replace", self._replace_locked, book)
        if stored is not None:
            logger.debug(f"Replaced {stored}")
        return stored

    async def delete_book(self, book_id: int) -> bool:
        """Remove a book. Returns whether anything was removed."""
        removed = await self._offload("delete", self._delete_locked, book_id)
        if removed:
            logger.debug(f"Deleted book id {book_id}")
        return removed

    async def count(self) -> int:
        return await self._offload("count", self._count_locked)
