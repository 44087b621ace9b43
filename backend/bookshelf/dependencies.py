"""
FastAPI dependencies for the book registry and settings.
"""
from fastapi import Request

from bookshelf.config import Settings
from bookshelf.registry import BookRegistry


def get_registry(request: Request) -> BookRegistry:
    """
    Dependency to get the registry owned by the running application.
    """
    return request.app.state.registry


def get_app_settings(request: Request) -> Settings:
    """
    Dependency to get the settings the application was built with.
    """
    return request.app.state.settings
