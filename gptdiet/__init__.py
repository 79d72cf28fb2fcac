"""GPT Diet - diet and exercise recommendation chat client.

Combines NiceGUI for the chat page, httpx for talking to the remote chat
service, FastAPI for hosting, and Pydantic for data validation.

Components:
    - chat: Session state and the send/receive exchange
    - client: HTTP client and configuration for the remote chat endpoint
    - models: Message and wire schemas
    - ui: Web interface for chat interactions
    - api: Host application and health endpoint
"""

__version__ = "0.1.0"
