"""Chat client configuration with environment variable loading.

Pydantic-based configuration for the remote chat endpoint.
"""

import os

from dotenv import load_dotenv
from pydantic import AnyHttpUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:5000"
DEFAULT_ERROR_MESSAGE = "오류가 발생했습니다. 다시 시도해주세요."

_HTTP_URL = TypeAdapter(AnyHttpUrl)


class ClientConfig(BaseModel):
    """Configuration for the chat service client.

    Attributes:
        api_base_url: Base URL of the chat service (the ``/chat`` path is appended).
        request_timeout: Transport timeout in seconds for a single request.
        error_message: Reply text shown when the chat service call fails.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("CHAT_API_URL", DEFAULT_API_BASE_URL),
        description="Chat service base URL",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAT_REQUEST_TIMEOUT", "120.0")),
        gt=0.0,
        description="Transport timeout in seconds",
    )
    error_message: str = Field(
        default_factory=lambda: os.getenv("CHAT_ERROR_MESSAGE", DEFAULT_ERROR_MESSAGE),
        description="Reply shown in place of the assistant's turn on failure",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require a well-formed http(s) base URL and drop any trailing slash."""
        v = v.strip()
        if not v:
            raise ValueError("Chat service URL required. Set CHAT_API_URL in .env")
        try:
            _HTTP_URL.validate_python(v)
        except ValidationError as e:
            raise ValueError(f"Invalid chat service URL {v!r}: {e.errors()[0]['msg']}") from e
        return v.rstrip("/")

    @field_validator("error_message")
    @classmethod
    def validate_error_message(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("error_message must not be empty")
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    return ClientConfig()
