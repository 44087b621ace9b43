"""In-memory book record model."""
from dataclasses import dataclass

MAX_BOOK_ID = 2**32 - 1


@dataclass(frozen=True)
class Book:
    """
    Book record held by the registry.

    Instances are immutable; updating a book means storing a new instance
    under the same id.
    """
    id: int
    title: str
    author: str

    def __str__(self) -> str:
        return f'Book {{ id: {self.id}, title: "{self.title}", author: "{self.author}" }}'


SEED_BOOKS = (
    Book(id=1, title="Antigone", author="Sophocles"),
    Book(id=2, title="Beloved", author="Toni Morrison"),
    Book(id=3, title="Candide", author="Voltaire"),
)
