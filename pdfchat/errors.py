"""Exceptions raised by the PDF Chat client."""

from enum import StrEnum


class PDFChatError(Exception):
    """Base class for client errors."""

    pass


class AuthFailure(StrEnum):
    INVALID_CREDENTIALS = "invalid_credentials"
    SERVICE_UNAVAILABLE = "service_unavailable"


class AuthError(PDFChatError):
    """Raised when login does not yield a session."""

    def __init__(
        self,
        reason: AuthFailure = AuthFailure.INVALID_CREDENTIALS,
        message: str | None = None,
    ) -> None:
        self.reason = reason
        if message is None:
            message = (
                "Invalid credentials"
                if reason is AuthFailure.INVALID_CREDENTIALS
                else "Authentication service unavailable"
            )
        super().__init__(message)


class SignupError(PDFChatError):
    """Raised when the registration service rejects a signup."""

    DEFAULT_MESSAGE = "Failed to sign up."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.DEFAULT_MESSAGE
        super().__init__(self.message)


class UploadError(PDFChatError):
    """Raised when the ingestion service does not accept a document."""

    pass


class QueryError(PDFChatError):
    """Raised when the query service does not return an answer."""

    pass


class BusyError(PDFChatError):
    """Raised when an operation is requested while one is outstanding."""

    pass


class UploadBusyError(BusyError):
    pass


class ChatBusyError(BusyError):
    pass
