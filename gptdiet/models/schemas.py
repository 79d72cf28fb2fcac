from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ChatMode(str, Enum):
    """Conversation topic selected in the header."""

    DIET = "diet"
    EXERCISE = "exercise"


class Message(BaseModel):
    """A single transcript entry.

    Attributes:
        text: The message text as typed or as returned by the chat service.
        is_user: True for messages typed by the user, False for replies.
        mode: Conversation mode the message belongs to.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    is_user: bool
    mode: ChatMode


class ChatRequest(BaseModel):
    """Request payload for the remote chat endpoint.

    Attributes:
        message: User's message, sent as typed.
        type: Conversation mode the reply should be tailored to.
    """

    message: str = Field(..., description="The user's message")
    type: ChatMode = Field(..., description="Conversation mode: 'diet' or 'exercise'")


class ChatReply(BaseModel):
    """Successful response body from the remote chat endpoint."""

    content: str = Field(..., description="Reply text, may contain simple markdown")
