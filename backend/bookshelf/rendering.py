"""HTML fragments returned by the book and demo routes."""
from html import escape
from typing import Iterable

from bookshelf.models import Book

DEMO_FORM_PAGE = """
    <!doctype html>
    <html>
        <head>
            <title>Book</title>
        </head>
        <body>
            <h1>Book</h1>
            <form method="post" action="/demo-form">
                <p>
                    <label for="id">
                        Id:
                        <br>
                        <input name="id">
                    </label>
                </p>
                <p>
                    <label for="title">
                        Title:
                        <br>
                        <input name="title">
                    </label>
                </p>
                <p>
                    <label for="author">
                        Author:
                        <br>
                        <input name="author">
                    </label>
                </p>
                <p>
                    <input type="submit">
                </p>
            </form>
        </body>
    </html>
    """

_DEMO_FORM_RESULT_PAGE = """
            <!doctype html>
            <html>
                <head>
                    <title>Book</title>
                </head>
                <body>
                    <h1>Book</h1>
                    {book}
                </body>
            </html>
        """


def book_paragraph(book: Book) -> str:
    return f"<p>{book}</p>\n"


def book_list(books: Iterable[Book]) -> str:
    return "".join(book_paragraph(book) for book in books)


def book_not_found(book_id: int) -> str:
    return f"<p>Book id {book_id} not found</p>"


def book_edit_form(book: Book) -> str:
    """Form that posts an edited book back to ``/books/{id}/form``."""
    return (
        f'<form method="post" action="/books/{book.id}/form">\n'
        f'<input type="hidden" name="id" value="{book.id}">\n'
        f'<p><input type="text" name="title" value="{escape(book.title)}"></p>\n'
        f'<p><input type="text" name="author" value="{escape(book.author)}"></p>\n'
        '<input type="submit" value="Save" >\n'
        "</form>\n"
    )


def demo_form_result(book: Book) -> str:
    return _DEMO_FORM_RESULT_PAGE.format(book=book)
