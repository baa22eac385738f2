"""Unit tests for individual components in isolation.

Coverage:
    - config: Environment-driven client configuration
    - models: Pydantic validation of state and wire models
    - session: Session persistence
    - api: Response parsing helpers
    - navigation: Page state machine

Follows single responsibility per test function. Leverages pytest-check for
multiple assertions per test.
"""
