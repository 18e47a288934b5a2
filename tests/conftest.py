"""Shared pytest fixtures for the reading list tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from reading_list.config import Settings
from reading_list.main import create_app
from reading_list.models import CreateBookRequest
from reading_list.plugin import Platform, run


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", uploads_url="https://example.org/uploads")


@pytest.fixture
def platform(settings: Settings) -> Platform:
    """A booted platform with no entries."""
    platform = Platform.from_settings(settings)
    run(platform)
    platform.boot()
    return platform


@pytest.fixture
def dune_and_foundation(platform: Platform):
    """Two books: Dune without an image, Foundation with a 600x900 cover."""
    cover = platform.media.add_attachment("2025/03/foundation.jpg", 600, 900, alt="Foundation cover")
    dune = platform.store.insert_post(
        CreateBookRequest(title="Dune", body="<p>Spice must flow.</p>")
    )
    foundation = platform.store.insert_post(
        CreateBookRequest(title="Foundation", body="<p>Psychohistory.</p>", image_ref=cover.id)
    )
    return dune, foundation


@pytest.fixture
def sample_seed() -> Path:
    return Path(__file__).resolve().parents[1] / "data" / "sample_books.json"


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
