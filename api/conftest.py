"""Pytest configuration and fixtures for the Brand Kit Generator API."""

import json
import os
import sys
from pathlib import Path
from typing import Callable, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

# Add the api directory to Python path
api_dir = Path(__file__).parent
sys.path.insert(0, str(api_dir))

from brandkit.main import app
from brandkit.routers.brand_kit import get_generation_service
from brandkit.services.generation import GenerationService


VALID_KIT = {
    "colors": ["#111111", "#222222", "#333333", "#444444", "#555555"],
    "headingFont": "Poppins",
    "bodyFont": "Inter",
    "personality": "Bold and modern.",
}


class FakeCompletionClient:
    """Stand-in for OpenAIChatClient that records every prompt it receives."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.prompts: List[str] = []

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def complete(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture(autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    test_env = {
        "OPENAI_API_KEY": "test-key",
        "SERVICE_ENV": "test",
        "LOG_LEVEL": "DEBUG",
        "BRAND_KIT_VALIDATION": "pass_through",
    }
    previous = {key: os.environ.get(key) for key in test_env}

    for key, value in test_env.items():
        os.environ[key] = value

    yield

    for key, value in previous.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


@pytest.fixture
def valid_kit() -> dict:
    return dict(VALID_KIT)


@pytest.fixture
def valid_kit_json() -> str:
    return json.dumps(VALID_KIT)


@pytest.fixture
def fake_client_factory() -> Callable[..., FakeCompletionClient]:
    return FakeCompletionClient


@pytest.fixture
def override_service() -> Generator[Callable[[GenerationService], None], None, None]:
    """Route the API dependency to a prepared GenerationService."""

    def _override(service: GenerationService) -> None:
        app.dependency_overrides[get_generation_service] = lambda: service

    yield _override
    app.dependency_overrides.pop(get_generation_service, None)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_brief() -> dict:
    """Sample request body as sent by the web client."""
    return {
        "brandName": "Lunar Studio",
        "industry": "fitness coaching",
        "adjectives": "bold, playful, modern",
        "audience": "busy founders",
    }
