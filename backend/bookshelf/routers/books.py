"""
Routers for /books endpoints (CRUD over the book registry).
"""
from fastapi import APIRouter, Body, Depends, Form, Path
from fastapi.responses import HTMLResponse

from bookshelf import rendering
from bookshelf.dependencies import get_registry
from bookshelf.models import MAX_BOOK_ID
from bookshelf.registry import BookRegistry
from bookshelf.schemas import BookIn

router = APIRouter(prefix="/books", tags=["Books"], default_response_class=HTMLResponse)


@router.get("")
async def list_books(
    registry: BookRegistry = Depends(get_registry),
) -> HTMLResponse:
    """
    List every book, sorted by title.
    """
    books = await registry.list_books()
    return HTMLResponse(rendering.book_list(books))


@router.put("")
async def put_book(
    book: BookIn = Body(...),
    registry: BookRegistry = Depends(get_registry),
) -> HTMLResponse:
    """
    Create a book or replace the one with the same id.
    """
    stored = await registry.upsert_book(book.to_book())
    return HTMLResponse(f"put book: {stored}")


@router.get("/{book_id}")
async def get_book(
    book_id: int = Path(..., ge=0, le=MAX_BOOK_ID),
    registry: BookRegistry = Depends(get_registry),
) -> HTMLResponse:
    """
    Retrieve a single book by its id.
    """
    book = await registry.get_book(book_id)
    if book is None:
        return HTMLResponse(rendering.book_not_found(book_id))
    return HTMLResponse(rendering.book_paragraph(book))


@router.delete("/{book_id}")
async def delete_book(
    book_id: int = Path(..., ge=0, le=MAX_BOOK_ID),
    registry: BookRegistry = Depends(get_registry),
) -> HTMLResponse:
    """
    Delete a book by its id.
    """
    if await registry.delete_book(book_id):
        return HTMLResponse(f"delete book id: {book_id}")
    return HTMLResponse(f"book id: {book_id} not found")


@router.get("/{book_id}/form")
async def get_book_form(
    book_id: int = Path(..., ge=0, le=MAX_BOOK_ID),
    registry: BookRegistry = Depends(get_registry),
) -> HTMLResponse:
    """
    Render an edit form for an existing book.
    """
    book = await registry.get_book(book_id)
    if book is None:
        return HTMLResponse(rendering.book_not_found(book_id))
    return HTMLResponse(rendering.book_edit_form(book))


@router.post("/{book_id}/form")
async def post_book_form(
    book_id: int = Path(..., ge=0, le=MAX_BOOK_ID),
    book: BookIn = Form(...),
    registry: BookRegistry = Depends(get_registry),
) -> HTMLResponse:
    """
    Update an existing book from the edit form. The form's id is used.
    """
    stored = await registry.replace_book(book.to_book())
    if stored is None:
        return HTMLResponse(f"Book id not found: {book.id} ")
    return HTMLResponse(f"update book: {stored}")
