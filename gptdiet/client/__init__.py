"""Client for the remote chat completion service.

Responsibilities:
    - Endpoint configuration from environment / .env
    - One POST /chat request per user message
    - Mapping every failure to RemoteCallFailed

Maintains clean separation from the UI layer.
"""

from gptdiet.client.chat_client import ChatClient, RemoteCallFailed, get_chat_client
from gptdiet.client.config import ClientConfig, get_client_config

__all__ = [
    "ChatClient",
    "ClientConfig",
    "RemoteCallFailed",
    "get_chat_client",
    "get_client_config",
]
