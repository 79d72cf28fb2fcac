"""Pydantic models for the transcript and the chat service wire format.

Provides type safety and validation at the HTTP boundary.

Models:
    - ChatMode: Conversation topic (diet or exercise)
    - Message: Immutable transcript entry
    - ChatRequest: Outgoing chat request payload
    - ChatReply: Incoming chat reply payload
"""

from gptdiet.models.schemas import ChatMode, ChatReply, ChatRequest, Message

__all__ = ["ChatMode", "ChatReply", "ChatRequest", "Message"]
