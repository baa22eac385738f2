"""Client configuration with environment variable loading.

Pydantic-based configuration for the PDF Chat client. Values come from the
environment, optionally populated from a .env file.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ClientConfig(BaseModel):
    """Configuration for the PDF Chat client.

    Attributes:
        api_base_url: Base URL of the backend API.
        request_timeout: Transport timeout in seconds for every backend call.
        session_storage_key: Storage key holding the persisted session.
        storage_secret: Secret used by NiceGUI to sign browser storage.
        host: Interface the UI server binds to.
        port: Port the UI server listens on.
        title: Browser window title.
    """

    # Environment defaults arrive as strings and must pass the same checks
    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://127.0.0.1:8000"),
        description="Backend base URL",
    )
    request_timeout: float = Field(
        default_factory=lambda: os.getenv("REQUEST_TIMEOUT", "60"),
        gt=0.0,
        le=600.0,
        description="Timeout in seconds applied to each backend request",
    )
    session_storage_key: str = Field(
        default_factory=lambda: os.getenv("SESSION_STORAGE_KEY", "user"),
        description="Key of the persisted session record",
    )
    storage_secret: str = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET", "pdf-chat-secret"),
        description="Secret for NiceGUI user storage",
    )
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(
        default_factory=lambda: os.getenv("PORT", "8080"),
        ge=1,
        le=65535,
    )
    title: str = "PDF Chat"

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("session_storage_key")
    @classmethod
    def validate_storage_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SESSION_STORAGE_KEY must not be empty")
        return v.strip()


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    return ClientConfig()
