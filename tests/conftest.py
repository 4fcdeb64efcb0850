"""Pytest fixtures and shared test configuration.

Fixtures:
    - chat_config: Valid configuration with a dummy API key
    - async_client: HTTPX client for the FastAPI host
    - snapshots: Recorder subscribed to a conversation
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.config import ChatConfig
from src.api import create_app
from src.models.schemas import ConversationSnapshot


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return a valid configuration that never reaches the network.

    Returns:
        ChatConfig with a dummy key and the default model.
    """
    return ChatConfig(api_key="test-key-12345", model_name="gemini-2.5-flash")


@pytest.fixture
def snapshots() -> list[ConversationSnapshot]:
    """Return an empty list to collect published snapshots into."""
    return []


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
