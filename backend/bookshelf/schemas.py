"""
Pydantic schemas for the book routes.
"""
from pydantic import BaseModel, ConfigDict, Field

from bookshelf.models import MAX_BOOK_ID, Book


class BookIn(BaseModel):
    """
    Book payload accepted by the JSON and form routes.
    """
    id: int = Field(..., ge=0, le=MAX_BOOK_ID)
    title: str
    author: str

    model_config = ConfigDict(extra="ignore")

    def to_book(self) -> Book:
        return Book(id=self.id, title=self.title, author=self.author)
