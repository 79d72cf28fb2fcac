"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - client_config: ClientConfig pointing at an in-process chat service
    - chat_service: FastAPI stand-in for the remote chat endpoint
    - async_client: HTTPX client for the host application
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient

from gptdiet.api import create_app
from gptdiet.client.config import ClientConfig
from gptdiet.models.schemas import ChatMode, ChatReply, ChatRequest

ERROR_TEXT = "오류가 발생했습니다. 다시 시도해주세요."


@pytest.fixture
def client_config() -> ClientConfig:
    """Return a config aimed at the test chat service.

    Returns:
        ClientConfig with a fixed base URL and the default error text.
    """
    return ClientConfig(
        api_base_url="http://chat.test",
        request_timeout=5.0,
        error_message=ERROR_TEXT,
    )


@pytest.fixture
def chat_service() -> FastAPI:
    """Create an in-process chat service honoring the POST /chat contract.

    Replies are canned per mode. A message of "fail" returns 503.
    Received requests are kept on ``app.state.received``.
    """
    service = FastAPI()
    service.state.received = []

    replies = {
        ChatMode.DIET: "Try more protein",
        ChatMode.EXERCISE: "**Squats**: 3 sets of 10",
    }

    @service.post("/chat", response_model=ChatReply)
    async def chat(request: ChatRequest) -> ChatReply:
        service.state.received.append(request)
        if request.message == "fail":
            raise HTTPException(status_code=503, detail="model unavailable")
        return ChatReply(content=replies[request.type])

    return service


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
