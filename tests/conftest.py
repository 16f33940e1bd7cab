"""Pytest configuration and fixtures."""

import os

# src.main builds the Gemini agent at import time and refuses to start without a key
os.environ.setdefault("GOOGLE_GEMINI_KEY", "test-gemini-key")  # pragma: allowlist secret

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.agents.code_reviewer import GeminiTextGenerator
from src.main import app, create_app


@pytest.fixture
def client() -> TestClient:
    """Return a FastAPI TestClient."""
    return TestClient(app)


@pytest.fixture
def mock_generator() -> AsyncMock:
    """Return a substitute text generator."""
    generator = AsyncMock(spec=GeminiTextGenerator)
    generator.generate.return_value = "Consider adding input validation."
    return generator


@pytest.fixture
def make_client() -> Callable[[AsyncMock], TestClient]:
    """Return a factory building a TestClient around a given generator."""

    def _make(generator: AsyncMock) -> TestClient:
        return TestClient(create_app(generator=generator))

    return _make


@pytest.fixture
def review_url() -> str:
    """Return the review endpoint URL."""
    return "/ai/review"
