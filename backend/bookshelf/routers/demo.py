"""
Demonstration endpoints showing JSON, form, query and path handling.
"""
import json
from typing import Any

from fastapi import APIRouter, Body, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from bookshelf import rendering
from bookshelf.config import Settings
from bookshelf.dependencies import get_app_settings
from bookshelf.schemas import BookIn

router = APIRouter(tags=["Demo"], default_response_class=PlainTextResponse)


@router.get("/health", response_class=JSONResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


@router.get("/demo.json", response_class=JSONResponse)
async def get_demo_json() -> dict:
    return {"a": "b"}


@router.put("/demo.json")
async def put_demo_json(data: Any = Body(...)) -> PlainTextResponse:
    return PlainTextResponse(f"Put demo JSON data: {json.dumps(data, ensure_ascii=False)}")


@router.get("/demo-form", response_class=HTMLResponse)
async def get_demo_form() -> HTMLResponse:
    """
    Respond with a typical HTML form with input fields.
    """
    return HTMLResponse(rendering.DEMO_FORM_PAGE)


@router.post("/demo-form", response_class=HTMLResponse)
async def post_demo_form(book: BookIn = Form(...)) -> HTMLResponse:
    """
    Echo the submitted book back as a page. Nothing is stored.
    """
    return HTMLResponse(rendering.demo_form_result(book.to_book()))


@router.get("/demo-query")
async def get_demo_query(request: Request) -> PlainTextResponse:
    params = dict(request.query_params)
    return PlainTextResponse(f"Demo query params: {json.dumps(params, ensure_ascii=False)}")


@router.get("/demo-path/{id}")
async def get_demo_path_id(id: str) -> PlainTextResponse:
    return PlainTextResponse(f"Get demo path id: {json.dumps(id, ensure_ascii=False)}")


@router.get("/demo-http-status-code")
async def demo_http_status_code() -> PlainTextResponse:
    return PlainTextResponse("Everything is Ok", status_code=status.HTTP_200_OK)


@router.get("/foo")
async def get_foo() -> PlainTextResponse:
    return PlainTextResponse("GET foo")


@router.put("/foo")
async def put_foo() -> PlainTextResponse:
    return PlainTextResponse("PUT foo")
