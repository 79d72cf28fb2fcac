"""FastAPI host application for the chat page.

The chat page is mounted onto this app in integrated mode.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (NiceGUI, mounted at startup)
"""

from gptdiet.api.app import create_app

__all__ = ["create_app"]
