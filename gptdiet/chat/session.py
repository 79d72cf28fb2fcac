"""Chat session state and the send/receive exchange.

Holds everything the chat page displays: the selected mode, the input
buffer, the loading flag, and the transcript. The transcript is append-only;
switching modes only changes which part of it is visible.
"""

import logging
from collections.abc import Callable

from gptdiet.client.chat_client import ChatClient, RemoteCallFailed, get_chat_client
from gptdiet.models.schemas import ChatMode, Message

logger = logging.getLogger(__name__)


class ChatSession:
    """Manages chat state for a single page session."""

    def __init__(
        self,
        client: ChatClient | None = None,
        mode: ChatMode | str = ChatMode.DIET,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            client: Chat service client. Uses the global client if not provided.
            mode: Initially selected conversation mode.
            on_change: Called after every state change so the view can re-render.
        """
        self._client = client or get_chat_client()
        self._messages: list[Message] = []
        self._pending = 0
        self.mode: ChatMode = ChatMode(mode)
        self.input_text: str = ""
        self.on_change = on_change

    @property
    def messages(self) -> tuple[Message, ...]:
        """Full transcript across both modes, in insertion order."""
        return tuple(self._messages)

    @property
    def visible_messages(self) -> list[Message]:
        """Messages belonging to the current mode, in insertion order."""
        return [msg for msg in self._messages if msg.mode == self.mode]

    @property
    def loading(self) -> bool:
        """True while at least one request is in flight."""
        return self._pending > 0

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def select_mode(self, mode: ChatMode | str) -> None:
        """Switch the visible conversation.

        Raises:
            ValueError: If ``mode`` is not a known conversation mode.
        """
        self.mode = ChatMode(mode)
        self._notify()

    def update_input(self, text: str) -> None:
        self.input_text = text
        self._notify()

    async def send_message(self) -> Message | None:
        """Send the input buffer to the chat service.

        The user message is appended and the buffer cleared before the
        request goes out. The reply (or the configured error text if the call
        fails) is tagged with the mode that was active at send time and
        appended to the tail of the transcript once the call completes.

        The request is made and loading clears even if ``on_change`` raises;
        the callback's error is re-raised once the reply has landed.

        Returns:
            The appended reply message, or None if the buffer was blank.
        """
        text = self.input_text
        if not text.strip():
            return None

        mode = self.mode
        self._messages.append(Message(text=text, is_user=True, mode=mode))
        self.input_text = ""
        self._pending += 1

        try:
            try:
                self._notify()
            finally:
                reply = await self._exchange(text, mode)
        finally:
            self._pending -= 1
            self._notify()

        return reply

    async def _exchange(self, text: str, mode: ChatMode) -> Message:
        try:
            content = await self._client.send(text, mode)
        except RemoteCallFailed as e:
            logger.error(f"Chat request failed ({mode.value}): {e}")
            content = self._client.config.error_message

        reply = Message(text=content, is_user=False, mode=mode)
        self._messages.append(reply)
        return reply
