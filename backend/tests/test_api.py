"""API tests."""
import pytest
from httpx import AsyncClient

from bookshelf.registry import BookRegistry

SEED_LISTING = (
    '<p>Book { id: 1, title: "Antigone", author: "Sophocles" }</p>\n'
    '<p>Book { id: 2, title: "Beloved", author: "Toni Morrison" }</p>\n'
    '<p>Book { id: 3, title: "Candide", author: "Voltaire" }</p>\n'
)


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_list_books(client: AsyncClient):
    response = await client.get("/books")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text == SEED_LISTING


@pytest.mark.asyncio
async def test_get_book(client: AsyncClient):
    response = await client.get("/books/2")
    assert response.status_code == 200
    assert response.text == '<p>Book { id: 2, title: "Beloved", author: "Toni Morrison" }</p>\n'


@pytest.mark.asyncio
async def test_get_missing_book(client: AsyncClient):
    response = await client.get("/books/42")
    assert response.status_code == 200
    assert response.text == "<p>Book id 42 not found</p>"


@pytest.mark.asyncio
async def test_get_book_rejects_invalid_id(client: AsyncClient):
    assert (await client.get("/books/abc")).status_code == 422
    assert (await client.get("/books/-1")).status_code == 422
    assert (await client.get(f"/books/{2**32}")).status_code == 422


@pytest.mark.asyncio
async def test_put_book_creates_and_replaces(client: AsyncClient):
    payload = {"id": 4, "title": "Dune", "author": "Herbert"}
    response = await client.put("/books", json=payload)
    assert response.status_code == 200
    assert response.text == 'put book: Book { id: 4, title: "Dune", author: "Herbert" }'

    response = await client.get("/books")
    assert response.text.endswith('<p>Book { id: 4, title: "Dune", author: "Herbert" }</p>\n')

    payload["author"] = "Frank Herbert"
    await client.put("/books", json=payload)
    response = await client.get("/books/4")
    assert "Frank Herbert" in response.text


@pytest.mark.asyncio
async def test_put_book_missing_fields(client: AsyncClient):
    response = await client.put("/books", json={"id": 5, "title": "No author"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_book(client: AsyncClient):
    response = await client.delete("/books/2")
    assert response.status_code == 200
    assert response.text == "delete book id: 2"

    response = await client.get("/books/2")
    assert response.text == "<p>Book id 2 not found</p>"

    response = await client.delete("/books/2")
    assert response.text == "book id: 2 not found"


@pytest.mark.asyncio
async def test_get_book_form(client: AsyncClient):
    response = await client.get("/books/1/form")
    assert response.status_code == 200
    assert '<form method="post" action="/books/1/form">' in response.text
    assert '<input type="hidden" name="id" value="1">' in response.text
    assert '<input type="text" name="title" value="Antigone">' in response.text
    assert '<input type="text" name="author" value="Sophocles">' in response.text

    response = await client.get("/books/9/form")
    assert response.text == "<p>Book id 9 not found</p>"


@pytest.mark.asyncio
async def test_post_book_form_updates_existing(client: AsyncClient):
    response = await client.post(
        "/books/3/form",
        data={"id": "3", "title": "Candide", "author": "Francois-Marie Arouet"},
    )
    assert response.status_code == 200
    assert response.text == (
        'update book: Book { id: 3, title: "Candide", author: "Francois-Marie Arouet" }'
    )


@pytest.mark.asyncio
async def test_post_book_form_does_not_create(client: AsyncClient, registry: BookRegistry):
    response = await client.post(
        "/books/8/form",
        data={"id": "8", "title": "Emma", "author": "Jane Austen"},
    )
    assert response.status_code == 200
    assert response.text == "Book id not found: 8 "
    assert await registry.get_book(8) is None


@pytest.mark.asyncio
async def test_worker_failure_returns_server_error(
    client: AsyncClient, registry: BookRegistry, monkeypatch
):
    def explode():
        raise RuntimeError("boom")

    monkeypatch.setattr(registry, "_list_locked", explode)

    response = await client.get("/books")
    assert response.status_code == 500
    assert response.text == "Internal Server Error"

    # Other requests are unaffected
    response = await client.get("/books/1")
    assert response.status_code == 200
    assert "Antigone" in response.text


@pytest.mark.asyncio
async def test_unknown_route(client: AsyncClient):
    response = await client.get("/nowhere?x=1")
    assert response.status_code == 404
    assert response.text == "No route /nowhere?x=1"


@pytest.mark.asyncio
async def test_demo_routes(client: AsyncClient):
    response = await client.get("/demo.json")
    assert response.json() == {"a": "b"}

    response = await client.put("/demo.json", json={"k": 1})
    assert response.text == 'Put demo JSON data: {"k": 1}'

    response = await client.get("/demo-query", params={"color": "red"})
    assert response.text == 'Demo query params: {"color": "red"}'

    response = await client.get("/demo-path/abc")
    assert response.text == 'Get demo path id: "abc"'

    response = await client.get("/demo-http-status-code")
    assert response.status_code == 200
    assert response.text == "Everything is Ok"

    assert (await client.get("/foo")).text == "GET foo"
    assert (await client.put("/foo")).text == "PUT foo"


@pytest.mark.asyncio
async def test_demo_form(client: AsyncClient, registry: BookRegistry):
    response = await client.get("/demo-form")
    assert '<form method="post" action="/demo-form">' in response.text

    response = await client.post(
        "/demo-form", data={"id": "11", "title": "Ulysses", "author": "James Joyce"}
    )
    assert response.status_code == 200
    assert 'Book { id: 11, title: "Ulysses", author: "James Joyce" }' in response.text
    assert await registry.get_book(11) is None


@pytest.mark.asyncio
async def test_wrong_method_on_known_route(client: AsyncClient):
    response = await client.patch("/books")
    assert response.status_code == 405
    assert response.text == ""


@pytest.mark.asyncio
async def test_demo_output_keeps_non_ascii(client: AsyncClient):
    response = await client.get("/demo-path/café")
    assert response.text == 'Get demo path id: "café"'

    response = await client.get("/demo-query", params={"city": "Zürich"})
    assert response.text == 'Demo query params: {"city": "Zürich"}'
