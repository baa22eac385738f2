"""HTTP client for the PDF Chat backend.

Wraps an httpx.AsyncClient and translates transport failures and non-2xx
responses into the client's exception taxonomy. Holds no session state:
callers pass the bearer token on every authenticated call.
"""

import logging
from typing import IO, Any

import httpx
from pydantic import ValidationError

from pdfchat.config import ClientConfig, get_client_config
from pdfchat.errors import AuthError, AuthFailure, QueryError, SignupError, UploadError
from pdfchat.models.schemas import (
    QueryRequest,
    QueryResponse,
    SignupRequest,
    TokenResponse,
    ValidationErrorItem,
)

logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/v1/auth/login/access-token"
SIGNUP_PATH = "/api/v1/auth/signup"
UPLOAD_PATH = "/api/v1/pdfs/upload-pdf"
QUERY_PATH = "/api/v1/pdfs/query"


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def extract_token(body: Any) -> str | None:
    """Pull the access token out of a login response body.

    The service answers either with a bare JSON string or with an object
    carrying an ``access_token`` field.

    Returns:
        The token, or None if the body has neither shape.
    """
    if isinstance(body, str):
        return body or None
    if isinstance(body, dict):
        try:
            return TokenResponse.model_validate(body).access_token
        except ValidationError:
            return None
    return None


def extract_signup_error(response: httpx.Response) -> str:
    """Derive a user-facing message from a rejected signup response.

    Uses the first validation error entry when the server returns a list,
    the detail itself when it is a plain string, and a generic message
    otherwise.
    """
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        return SignupError.DEFAULT_MESSAGE

    if isinstance(detail, list) and detail:
        try:
            return ValidationErrorItem.model_validate(detail[0]).msg or SignupError.DEFAULT_MESSAGE
        except ValidationError:
            return SignupError.DEFAULT_MESSAGE
    if isinstance(detail, str) and detail.strip():
        return detail
    return SignupError.DEFAULT_MESSAGE


class BackendClient:
    """Async client for the authentication, ingestion and query endpoints.

    Usable as an async context manager; otherwise call aclose() when done.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional transport override, used to mount an
                       in-process app or a mock in tests.
        """
        self._config = config or get_client_config()
        self._http = httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=httpx.Timeout(self._config.request_timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def login(self, username: str, password: str) -> str:
        """Exchange credentials for a bearer token.

        Credentials are sent form-encoded.

        Returns:
            The access token.

        Raises:
            AuthError: INVALID_CREDENTIALS on any non-2xx response or a body
                without a token, SERVICE_UNAVAILABLE on transport failure.
        """
        try:
            response = await self._http.post(
                LOGIN_PATH,
                data={"username": username, "password": password},
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            logger.info(f"Login rejected for {username!r}: HTTP {e.response.status_code}")
            raise AuthError(AuthFailure.INVALID_CREDENTIALS) from e
        except httpx.RequestError as e:
            logger.warning(f"Login request failed: {e}")
            raise AuthError(AuthFailure.SERVICE_UNAVAILABLE) from e
        except ValueError as e:
            logger.warning(f"Login response is not JSON: {e}")
            raise AuthError(AuthFailure.INVALID_CREDENTIALS) from e

        token = extract_token(body)
        if token is None:
            logger.warning("Login response carried no access token")
            raise AuthError(AuthFailure.INVALID_CREDENTIALS)
        return token

    async def signup(self, username: str, email: str, password: str) -> None:
        """Register a new account.

        Raises:
            SignupError: With the server's first validation message when it
                provides one, a generic message otherwise.
        """
        payload = SignupRequest(username=username, email=email, password=password)
        try:
            response = await self._http.post(SIGNUP_PATH, json=payload.model_dump())
        except httpx.RequestError as e:
            logger.warning(f"Signup request failed: {e}")
            raise SignupError() from e

        if response.is_error:
            message = extract_signup_error(response)
            logger.info(f"Signup rejected for {username!r}: HTTP {response.status_code}")
            raise SignupError(message)

    async def upload_pdf(self, token: str, filename: str, content: bytes | IO[bytes]) -> None:
        """Send a document to the ingestion service as multipart field ``file``.

        The response body is ignored.

        Raises:
            UploadError: On transport failure or any non-2xx response.
        """
        try:
            response = await self._http.post(
                UPLOAD_PATH,
                files={"file": (filename, content, "application/pdf")},
                headers=auth_header(token),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UploadError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise UploadError(f"Connection failed: {e}") from e

    async def query(self, token: str, question: str) -> str:
        """Ask a question about the uploaded document.

        Returns:
            The answer text.

        Raises:
            QueryError: On transport failure, non-2xx response or a body that
                does not match ``{"response": str}``.
        """
        payload = QueryRequest(question=question)
        try:
            response = await self._http.post(
                QUERY_PATH,
                json=payload.model_dump(),
                headers=auth_header(token),
            )
            response.raise_for_status()
            return QueryResponse.model_validate_json(response.content).response
        except httpx.HTTPStatusError as e:
            raise QueryError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise QueryError(f"Connection failed: {e}") from e
        except ValidationError as e:
            raise QueryError("Malformed query response") from e
