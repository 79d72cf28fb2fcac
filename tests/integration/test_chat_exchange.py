"""Integration tests for the full send/receive exchange.

ChatSession and ChatClient talk to an in-process FastAPI chat service over
httpx.ASGITransport. No mocks - the request goes through real HTTP handling
and Pydantic validation on both sides.
"""

import httpx
import pytest
from fastapi import FastAPI

from gptdiet.chat.session import ChatSession
from gptdiet.client.chat_client import ChatClient
from gptdiet.client.config import ClientConfig
from gptdiet.models.schemas import ChatMode, ChatRequest, Message

from tests.conftest import ERROR_TEXT


class TestChatExchange:
    """ChatSession against a service honoring the POST /chat contract."""

    @pytest.fixture
    def session(self, client_config: ClientConfig, chat_service: FastAPI) -> ChatSession:
        client = ChatClient(config=client_config, transport=httpx.ASGITransport(app=chat_service))
        return ChatSession(client=client)

    async def test_diet_reply(self, session: ChatSession, chat_service: FastAPI) -> None:
        session.update_input("apple")

        await session.send_message()

        assert session.messages == (
            Message(text="apple", is_user=True, mode=ChatMode.DIET),
            Message(text="Try more protein", is_user=False, mode=ChatMode.DIET),
        )
        assert chat_service.state.received == [
            ChatRequest(message="apple", type=ChatMode.DIET)
        ]

    async def test_exercise_reply_keeps_markdown(self, session: ChatSession) -> None:
        session.select_mode(ChatMode.EXERCISE)
        session.update_input("leg day?")

        reply = await session.send_message()

        assert reply == Message(
            text="**Squats**: 3 sets of 10", is_user=False, mode=ChatMode.EXERCISE
        )

    async def test_service_error_becomes_error_reply(self, session: ChatSession) -> None:
        session.update_input("fail")

        reply = await session.send_message()

        assert reply is not None
        assert reply.text == ERROR_TEXT
        assert reply.is_user is False
        assert session.loading is False

    async def test_unreachable_service_becomes_error_reply(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        config = ClientConfig(api_base_url="http://localhost:5000", error_message=ERROR_TEXT)
        client = ChatClient(config=config, transport=httpx.MockTransport(refuse))
        session = ChatSession(client=client, mode=ChatMode.EXERCISE)
        session.update_input("plank?")

        await session.send_message()

        assert [m.text for m in session.visible_messages] == ["plank?", ERROR_TEXT]
        assert session.loading is False

    async def test_modes_stay_separate(self, session: ChatSession, chat_service: FastAPI) -> None:
        for text in ("breakfast?", "lunch?"):
            session.update_input(text)
            await session.send_message()
        session.select_mode(ChatMode.EXERCISE)
        session.update_input("cardio?")
        await session.send_message()

        assert len(session.visible_messages) == 2
        session.select_mode(ChatMode.DIET)
        assert len(session.visible_messages) == 4
        assert [r.type for r in chat_service.state.received] == [
            ChatMode.DIET,
            ChatMode.DIET,
            ChatMode.EXERCISE,
        ]


class TestChatServiceContract:
    """The request body the client produces is accepted by a strict service."""

    @pytest.fixture
    async def service_client(self, chat_service: FastAPI):
        transport = httpx.ASGITransport(app=chat_service)
        async with httpx.AsyncClient(transport=transport, base_url="http://chat.test") as client:
            yield client

    async def test_rejects_unknown_type(self, service_client: httpx.AsyncClient) -> None:
        response = await service_client.post("/chat", json={"message": "hi", "type": "sleep"})

        assert response.status_code == 422

    async def test_accepts_client_payload(self, service_client: httpx.AsyncClient) -> None:
        payload = ChatRequest(message="hi", type=ChatMode.DIET).model_dump(mode="json")

        response = await service_client.post("/chat", json=payload)

        assert response.status_code == 200
        assert response.json() == {"content": "Try more protein"}
