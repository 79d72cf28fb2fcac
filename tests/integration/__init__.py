"""Integration tests for components working together as a system.

Coverage:
    - Host application endpoints with real HTTP requests
    - Full chat exchange against an in-process FastAPI chat service

Uses httpx.ASGITransport, no external services required.
"""
