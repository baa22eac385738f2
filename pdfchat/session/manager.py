"""Authentication session lifecycle.

AuthSessionManager is the single owner of the current Session. Navigation,
documents and chat receive a reference to it and read the session or
subscribe to its changes; only this class replaces it.
"""

import logging
from collections.abc import Callable

from pdfchat.api.client import BackendClient
from pdfchat.models.schemas import Session
from pdfchat.observers import ObserverList
from pdfchat.session.store import SessionStore

logger = logging.getLogger(__name__)

SessionObserver = Callable[[Session | None], None]


class AuthSessionManager:
    """Owns login, signup and logout and the session they produce."""

    def __init__(self, store: SessionStore, client: BackendClient) -> None:
        self._store = store
        self._client = client
        self._session: Session | None = None
        self._loading = True
        self._observers = ObserverList()

    @property
    def loading(self) -> bool:
        """True until the persisted session has been restored."""
        return self._loading

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def token(self) -> str | None:
        return self._session.token if self._session else None

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    def subscribe(self, observer: SessionObserver) -> Callable[[], None]:
        """Call ``observer`` with the new session after every change.

        Returns:
            A callable that removes the observer.
        """
        return self._observers.add(observer)

    def restore(self) -> Session | None:
        """Rehydrate the persisted session. Runs once; later calls are no-ops."""
        if not self._loading:
            return self._session
        session = self._store.load()
        self._loading = False
        if session is not None:
            logger.info(f"Restored session for {session.username!r}")
            self._set_session(session)
        return session

    async def login(self, username: str, password: str) -> Session:
        """Authenticate and make the resulting session current.

        Any prior session is replaced.

        Raises:
            AuthError: If the service does not issue a token.
        """
        self.restore()
        token = await self._client.login(username, password)
        session = Session(token=token, username=username)
        self._store.save(session)
        logger.info(f"Logged in as {username!r}")
        self._set_session(session)
        return session

    async def signup(self, username: str, email: str, password: str) -> Session:
        """Register an account, then log in with the same credentials.

        Raises:
            SignupError: If registration is rejected.
            AuthError: If the follow-up login fails.
        """
        self.restore()
        await self._client.signup(username, email, password)
        logger.info(f"Registered {username!r}")
        return await self.login(username, password)

    def logout(self) -> None:
        """Forget the session locally. The server is not contacted."""
        self.restore()
        self._store.clear()
        if self._session is not None:
            logger.info(f"Logged out {self._session.username!r}")
        self._set_session(None)

    def _set_session(self, session: Session | None) -> None:
        self._session = session
        self._observers.notify(session)
