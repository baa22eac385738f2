"""Wiring of the client components for one user.

The session manager is built once and handed to every component that needs
the session, in dependency order.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from pdfchat.api.client import BackendClient
from pdfchat.chat import ChatPipeline
from pdfchat.documents import DocumentSession
from pdfchat.navigation import NavigationController
from pdfchat.session.manager import AuthSessionManager
from pdfchat.session.store import DEFAULT_KEY, SessionStore


@dataclass(frozen=True)
class Workspace:
    auth: AuthSessionManager
    navigation: NavigationController
    documents: DocumentSession
    chat: ChatPipeline


def create_workspace(
    storage: MutableMapping[str, Any],
    client: BackendClient,
    storage_key: str = DEFAULT_KEY,
    restore: bool = True,
) -> Workspace:
    """Build the components around a storage mapping and a backend client.

    Args:
        storage: Durable key-value mapping holding the session record.
        client: Backend client shared by all components.
        storage_key: Key of the session record.
        restore: Rehydrate the persisted session before returning.

    Returns:
        The wired components.
    """
    auth = AuthSessionManager(SessionStore(storage, storage_key), client)
    navigation = NavigationController(auth)
    documents = DocumentSession(auth, client)
    chat = ChatPipeline(auth, client, documents)
    if restore:
        auth.restore()
    return Workspace(auth=auth, navigation=navigation, documents=documents, chat=chat)
