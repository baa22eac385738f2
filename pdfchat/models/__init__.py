"""Pydantic models for client state and backend payloads.

Models:
    - Session: Authenticated identity (token + username)
    - Document: Active document and its upload status
    - Message: Individual message in the conversation
    - Page: Navigation states
    - TokenResponse, SignupRequest, QueryRequest, QueryResponse: wire payloads
"""

from pdfchat.models.schemas import (
    Document,
    Message,
    Page,
    QueryRequest,
    QueryResponse,
    Role,
    Session,
    SignupRequest,
    TokenResponse,
    UploadStatus,
    ValidationErrorItem,
)

__all__ = [
    "Document",
    "Message",
    "Page",
    "QueryRequest",
    "QueryResponse",
    "Role",
    "Session",
    "SignupRequest",
    "TokenResponse",
    "UploadStatus",
    "ValidationErrorItem",
]
