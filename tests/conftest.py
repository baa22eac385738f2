"""Pytest fixtures and shared test configuration.

Provides a fake backend and client components wired against it.

Fixtures:
    - fake_backend: In-process FastAPI app implementing the four endpoints
    - client: BackendClient mounted on the fake backend via ASGITransport
    - storage: Plain dict standing in for durable browser storage
    - workspace: Wired components for one user, nobody signed in
    - signed_in: Workspace with "alice" logged in
"""

import asyncio
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from fastapi import FastAPI, Form, Header, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from pdfchat.api.client import BackendClient
from pdfchat.config import ClientConfig
from pdfchat.models.schemas import QueryRequest, SignupRequest
from pdfchat.workspace import Workspace, create_workspace

BASE_URL = "http://test"


class UploadRecord(BaseModel):
    filename: str
    content: bytes
    authorization: str | None


@dataclass
class FakeBackend:
    """Scriptable stand-in for the authentication, ingestion and query services."""

    users: dict[str, str] = field(default_factory=dict)
    token_as_string: bool = False
    signup_error: Any = None
    signup_status: int = 422
    upload_status: int = status.HTTP_200_OK
    query_status: int = status.HTTP_200_OK
    answer: str = "It's about X"
    query_gate: asyncio.Event | None = None
    upload_gate: asyncio.Event | None = None
    uploads: list[UploadRecord] = field(default_factory=list)
    questions: list[tuple[str, str | None]] = field(default_factory=list)
    login_forms: list[dict[str, str]] = field(default_factory=list)
    app: FastAPI = field(init=False)

    def __post_init__(self) -> None:
        self.app = self._build_app()

    def token_for(self, username: str) -> str:
        return f"token-{username}"

    def _check_bearer(self, authorization: str | None) -> None:
        valid = {f"Bearer {self.token_for(u)}" for u in self.users}
        if authorization not in valid:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.post("/api/v1/auth/login/access-token")
        async def login(username: str = Form(...), password: str = Form(...)) -> Any:
            self.login_forms.append({"username": username, "password": password})
            if self.users.get(username) != password:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Incorrect username or password",
                )
            token = self.token_for(username)
            if self.token_as_string:
                return token
            return {"access_token": token, "token_type": "bearer"}

        @app.post("/api/v1/auth/signup", status_code=status.HTTP_201_CREATED)
        async def signup(payload: SignupRequest) -> Any:
            if self.signup_error is not None:
                return JSONResponse(status_code=self.signup_status, content=self.signup_error)
            self.users[payload.username] = payload.password
            return {"username": payload.username, "email": payload.email}

        @app.post("/api/v1/pdfs/upload-pdf")
        async def upload_pdf(
            file: UploadFile,
            authorization: str | None = Header(default=None),
        ) -> dict[str, str]:
            if self.upload_gate is not None:
                await self.upload_gate.wait()
            self._check_bearer(authorization)
            if self.upload_status != status.HTTP_200_OK:
                raise HTTPException(status_code=self.upload_status, detail="Ingestion failed")
            self.uploads.append(
                UploadRecord(
                    filename=file.filename or "",
                    content=await file.read(),
                    authorization=authorization,
                )
            )
            return {"message": "ok"}

        @app.post("/api/v1/pdfs/query")
        async def query(
            payload: QueryRequest,
            authorization: str | None = Header(default=None),
        ) -> dict[str, str]:
            self.questions.append((payload.question, authorization))
            if self.query_gate is not None:
                await self.query_gate.wait()
            self._check_bearer(authorization)
            if self.query_status != status.HTTP_200_OK:
                raise HTTPException(status_code=self.query_status, detail="Index unavailable")
            return {"response": self.answer}

        return app


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(api_base_url=BASE_URL, request_timeout=5.0)


@pytest.fixture
def fake_backend() -> FakeBackend:
    backend = FakeBackend()
    backend.users["alice"] = "secret"
    return backend


@pytest.fixture
async def client(
    fake_backend: FakeBackend, client_config: ClientConfig
) -> AsyncGenerator[BackendClient, None]:
    """Create a backend client talking to the fake backend in-process.

    Yields:
        BackendClient mounted on the fake backend app.
    """
    transport = httpx.ASGITransport(app=fake_backend.app)
    async with BackendClient(client_config, transport=transport) as backend_client:
        yield backend_client


@pytest.fixture
async def offline_client(client_config: ClientConfig) -> AsyncGenerator[BackendClient, None]:
    """Client whose every request fails at the transport level."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async with BackendClient(client_config, transport=httpx.MockTransport(refuse)) as backend_client:
        yield backend_client


@pytest.fixture
def storage() -> dict[str, Any]:
    return {}


@pytest.fixture
def workspace(storage: dict[str, Any], client: BackendClient) -> Workspace:
    return create_workspace(storage, client)


@pytest.fixture
async def signed_in(workspace: Workspace) -> Workspace:
    await workspace.auth.login("alice", "secret")
    return workspace
