"""Test package for GPT Diet.

Unit tests for isolated logic and integration tests for the exchange with a
chat service.

Structure:
    - unit/: Config, client, session and formatting tests
    - integration/: Host app and session-to-service workflow tests

Leverages pytest with pytest-check for soft assertions.
"""
