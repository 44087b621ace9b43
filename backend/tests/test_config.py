from bookshelf.config import Settings
from bookshelf.main import create_app


def test_default_listener():
    settings = Settings(_env_file=None)
    assert settings.host == "0.0.0.0"
    assert settings.port == 3000
    assert settings.seed_books is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_PORT", "8080")
    monkeypatch.setenv("BOOKSHELF_SEED_BOOKS", "false")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.seed_books is False


async def test_app_without_seed_starts_empty():
    app = create_app(Settings(_env_file=None, seed_books=False, log_level="WARNING"))
    assert await app.state.registry.count() == 0
    assert await app.state.registry.list_books() == []
