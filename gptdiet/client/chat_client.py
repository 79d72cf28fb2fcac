"""HTTP client for the remote chat completion service.

One request per call, no retries, no streaming. Every way the call can go
wrong (connection, status, body) surfaces as RemoteCallFailed so callers
handle a single error type.
"""

import logging

import httpx
from pydantic import ValidationError

from gptdiet.client.config import ClientConfig, get_client_config
from gptdiet.models.schemas import ChatMode, ChatReply, ChatRequest

logger = logging.getLogger(__name__)

CHAT_PATH = "/chat"


class RemoteCallFailed(Exception):
    """Raised when the chat service call fails for any reason."""

    pass


class ChatClient:
    """Client for the ``POST /chat`` endpoint.

    Wraps httpx with:
    - Base URL and timeout from ClientConfig
    - Request/response validation via Pydantic schemas
    - A single error type for all failures
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the chat client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to route requests
                       in-process (tests, embedded services).
        """
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def url(self) -> str:
        return f"{self._config.api_base_url}{CHAT_PATH}"

    async def send(self, message: str, mode: ChatMode) -> str:
        """Send a message and return the reply text.

        Args:
            message: The user's message.
            mode: Conversation mode the reply is requested for.

        Returns:
            The ``content`` field of the chat service response.

        Raises:
            RemoteCallFailed: On connection errors, non-2xx status,
                or a response body without a string ``content`` field.
        """
        payload = ChatRequest(message=message, type=mode).model_dump(mode="json")
        logger.debug(f"Sending to chat service: {payload}")

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.warning(f"Chat service returned HTTP {e.response.status_code}")
                raise RemoteCallFailed(f"HTTP {e.response.status_code}") from e
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.error(f"Error communicating with chat service: {e!r}")
                raise RemoteCallFailed(f"Connection failed: {e}") from e

        try:
            reply = ChatReply.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Malformed chat service response: {e.error_count()} error(s)")
            raise RemoteCallFailed("Malformed response body") from e

        return reply.content


# Module-level singleton instance
_chat_client: ChatClient | None = None


def get_chat_client() -> ChatClient:
    """Get or create the global chat client.

    Returns:
        The ChatClient instance.
    """
    global _chat_client
    if _chat_client is None:
        _chat_client = ChatClient()
    return _chat_client
