"""Chat message pipeline.

Holds the ordered conversation about the active document and dispatches
questions to the query service with the current session's token.
"""

import logging
from collections.abc import Callable

from pdfchat.api.client import BackendClient
from pdfchat.documents import DocumentSession
from pdfchat.errors import ChatBusyError, QueryError
from pdfchat.models.schemas import Document, Message, Role, Session
from pdfchat.observers import ObserverList
from pdfchat.session.manager import AuthSessionManager

logger = logging.getLogger(__name__)

QUERY_FAILED_NOTICE = "Sorry, there was an error processing your query."

ChatObserver = Callable[[], None]


class ChatPipeline:
    """Owns the message history and the pending flag.

    Messages are append-only. The history is scoped to the active document:
    every document notice replaces it with that single system message, and
    replies to questions asked in a replaced conversation are dropped.
    """

    def __init__(
        self,
        auth: AuthSessionManager,
        client: BackendClient,
        documents: DocumentSession,
    ) -> None:
        self._auth = auth
        self._client = client
        self._documents = documents
        self._messages: list[Message] = []
        self._pending = False
        self._conversation = 0
        self._observers = ObserverList()
        self.draft = ""
        documents.subscribe(self._on_document_notice)
        auth.subscribe(self._on_session_change)

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def pending(self) -> bool:
        """True exactly while a query is outstanding."""
        return self._pending

    def subscribe(self, observer: ChatObserver) -> Callable[[], None]:
        return self._observers.add(observer)

    def can_send(self, question: str) -> bool:
        return bool(question.strip()) and self._documents.ready_document is not None

    async def send(self, question: str) -> Message | None:
        """Ask a question about the active document.

        Does nothing when the question is blank or no document is ready.
        Failures are reported in the conversation, never raised.

        Returns:
            The reply appended to the conversation, or None if nothing was sent
            or the conversation was replaced before the reply arrived.

        Raises:
            ChatBusyError: If a previous question is still pending.
        """
        if not self.can_send(question):
            return None
        if self._pending:
            raise ChatBusyError("A question is already pending")

        conversation = self._conversation
        self._messages.append(Message(role=Role.USER, content=question))
        self.draft = ""
        self._pending = True
        self._notify()

        try:
            reply = await self._dispatch(question)
        finally:
            self._pending = False

        if conversation != self._conversation:
            logger.info("Dropping reply for a conversation that has been replaced")
            self._notify()
            return None

        self._messages.append(reply)
        self._notify()
        return reply

    def clear(self) -> None:
        """Start an empty conversation."""
        self._replace([])

    async def _dispatch(self, question: str) -> Message:
        try:
            token = self._auth.token
            if token is None:
                raise QueryError("Not authenticated")
            answer = await self._client.query(token, question)
        except QueryError as e:
            logger.warning(f"Query failed: {e}")
            return Message(role=Role.SYSTEM, content=QUERY_FAILED_NOTICE)
        return Message(role=Role.ASSISTANT, content=answer)

    def _on_document_notice(self, document: Document | None, notice: str) -> None:
        self._replace([Message(role=Role.SYSTEM, content=notice)])

    def _on_session_change(self, session: Session | None) -> None:
        if session is None:
            self.draft = ""
            self.clear()

    def _replace(self, messages: list[Message]) -> None:
        self._conversation += 1
        self._messages = messages
        self._notify()

    def _notify(self) -> None:
        self._observers.notify()
