"""Test package for PDF Chat.

Unit tests for isolated component logic and integration tests for the
login, upload and chat workflows.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end workflow tests against an in-process fake backend

The fake backend is a FastAPI app mounted through httpx.ASGITransport, so
requests travel the real HTTP client path without a network.
Leverages pytest with pytest-check for soft assertions.
"""
