"""Pydantic models for client state and backend payloads.

State models are frozen: owners replace them instead of mutating them.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Role(StrEnum):
    """Speaker of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Page(StrEnum):
    """Pages the navigation controller can show."""

    LANDING = "landing"
    LOGIN = "login"
    SIGNUP = "signup"
    DASHBOARD = "dashboard"


class UploadStatus(StrEnum):
    """Lifecycle of an uploaded document.

    FAILED only describes the outcome of an upload attempt; a failed upload
    leaves no active document behind.
    """

    UPLOADING = "uploading"
    READY = "ready"
    FAILED = "failed"


class Session(BaseModel):
    """An authenticated identity.

    Attributes:
        token: Opaque bearer token issued by the authentication service.
        username: Name the user signed in with.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., min_length=1, description="Bearer token")
    username: str = Field(..., description="Signed-in username")

    def __repr__(self) -> str:
        return f"Session(username={self.username!r})"


class Document(BaseModel):
    """The single document the conversation is scoped to.

    Attributes:
        name: Original file name.
        upload_status: Where the document is in its upload lifecycle.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Original filename of the document")
    upload_status: UploadStatus = Field(..., description="Upload lifecycle state")


class Message(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        role: The speaker identifier (user, assistant, or system).
        content: The message text.
    """

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="Message role: 'user', 'assistant', or 'system'")
    content: str = Field(..., description="The message content")


class TokenResponse(BaseModel):
    """Structured body returned by the login endpoint."""

    access_token: str = Field(..., min_length=1)
    token_type: str = "bearer"


class SignupRequest(BaseModel):
    """Payload for the signup endpoint."""

    username: str
    email: str
    password: str


class QueryRequest(BaseModel):
    """Payload for the document query endpoint."""

    question: str = Field(..., min_length=1, description="The user's question")


class QueryResponse(BaseModel):
    """Answer returned by the document query endpoint."""

    response: str = Field(..., description="The assistant's answer")


class ValidationErrorItem(BaseModel):
    """One entry of a FastAPI-style validation error list."""

    msg: str
    loc: list[str | int] = Field(default_factory=list)
    type: str | None = None
