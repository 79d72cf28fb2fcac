"""Unit tests for individual components in isolation.

Coverage:
    - client/: Configuration and error mapping of the chat client
    - chat/: Session state, mode filtering and the send path
    - ui/: Reply markdown rendering

The chat service is replaced by httpx.MockTransport handlers.
"""
