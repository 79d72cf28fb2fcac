"""Chat session logic: transcript, mode selection, and the send path."""

from gptdiet.chat.session import ChatSession

__all__ = ["ChatSession"]
