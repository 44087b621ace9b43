"""Application configuration and environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Bookshelf"
    debug: bool = False
    log_level: str = "INFO"

    # Listener
    host: str = "0.0.0.0"
    port: int = 3000

    # Registry
    seed_books: bool = True

    model_config = {
        "env_prefix": "BOOKSHELF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
