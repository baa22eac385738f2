"""Active document and its upload lifecycle."""

import logging
from collections.abc import Callable
from typing import IO

from pdfchat.api.client import BackendClient
from pdfchat.errors import UploadBusyError, UploadError
from pdfchat.models.schemas import Document, Session, UploadStatus
from pdfchat.observers import ObserverList
from pdfchat.session.manager import AuthSessionManager

logger = logging.getLogger(__name__)

# Receives the new document (None once discarded) and a system notice
DocumentObserver = Callable[[Document | None, str], None]


def uploading_notice(name: str) -> str:
    return f'Uploading and processing "{name}"...'


def ready_notice(name: str) -> str:
    return f'Document "{name}" processed. Ask away!'


def failed_notice(name: str) -> str:
    return f'Failed to upload "{name}". Please try again.'


class DocumentSession:
    """Tracks the single document the conversation is about.

    Each transition replaces the document wholesale and publishes a notice
    that the chat pipeline turns into a fresh conversation.
    """

    def __init__(self, auth: AuthSessionManager, client: BackendClient) -> None:
        self._auth = auth
        self._client = client
        self._document: Document | None = None
        self._uploading = False
        self._generation = 0
        self._observers = ObserverList()
        auth.subscribe(self._on_session_change)

    @property
    def document(self) -> Document | None:
        return self._document

    @property
    def ready_document(self) -> Document | None:
        """The active document if it can be queried, else None."""
        if self._document is not None and self._document.upload_status is UploadStatus.READY:
            return self._document
        return None

    @property
    def uploading(self) -> bool:
        return self._uploading

    def subscribe(self, observer: DocumentObserver) -> Callable[[], None]:
        return self._observers.add(observer)

    async def upload(self, name: str, content: bytes | IO[bytes]) -> Document | None:
        """Upload a document and make it the active one.

        Failures are absorbed: the document is discarded and a failure
        notice is published, leaving nothing behind for the next attempt.
        A cancelled upload is discarded the same way before the
        cancellation propagates.

        Returns:
            The ready document; a FAILED document describing the attempt
            when the upload failed (the active document is then None); or
            None if the upload was superseded while in flight.

        Raises:
            UploadBusyError: If another upload is still outstanding.
        """
        if self._uploading:
            raise UploadBusyError(f'Cannot upload "{name}" while another upload is in progress')

        self._generation += 1
        generation = self._generation
        self._uploading = True
        self._publish(Document(name=name, upload_status=UploadStatus.UPLOADING), uploading_notice(name))

        error: BaseException | None = None
        try:
            token = self._auth.token
            if token is None:
                raise UploadError("Not authenticated")
            await self._client.upload_pdf(token, name, content)
        except UploadError as e:
            error = e
        except BaseException as e:
            error = e
            raise
        finally:
            if generation == self._generation:
                self._uploading = False
                if error is not None:
                    logger.warning(f"Upload of {name!r} failed: {error!r}")
                    self._publish(None, failed_notice(name))

        if generation != self._generation:
            logger.info(f"Discarding result of superseded upload {name!r}")
            return None

        if error is not None:
            return Document(name=name, upload_status=UploadStatus.FAILED)

        document = Document(name=name, upload_status=UploadStatus.READY)
        logger.info(f"Document {name!r} is ready")
        self._publish(document, ready_notice(name))
        return document

    def reset(self) -> None:
        """Drop the active document and ignore any upload still in flight."""
        self._generation += 1
        self._uploading = False
        self._document = None

    def _on_session_change(self, session: Session | None) -> None:
        if session is None:
            self.reset()

    def _publish(self, document: Document | None, notice: str) -> None:
        self._document = document
        self._observers.notify(document, notice)
