"""Integration tests for components working together as a system.

Coverage:
    - Login, signup and logout against the fake backend
    - Upload lifecycle and conversation reset
    - Question dispatch, pending flag and failure handling

No network: the fake backend runs in-process.
"""
