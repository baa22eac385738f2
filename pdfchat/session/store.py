"""Durable persistence for the authenticated session.

The session is kept as a single JSON record under a fixed key of any
string-valued mutable mapping. In the UI that mapping is NiceGUI's
per-browser user storage; tests pass a plain dict.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from pydantic import ValidationError

from pdfchat.models.schemas import Session

logger = logging.getLogger(__name__)

DEFAULT_KEY = "user"


class SessionStore:
    """Save, load and clear the persisted session record."""

    def __init__(self, storage: MutableMapping[str, Any], key: str = DEFAULT_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, session: Session) -> None:
        """Persist the session, overwriting any previous record."""
        self._storage[self._key] = session.model_dump_json()

    def load(self) -> Session | None:
        """Return the persisted session, or None when absent or unreadable.

        Never raises: a corrupt record is logged and treated as no session.
        """
        raw = self._storage.get(self._key)
        if raw is None:
            return None
        try:
            if isinstance(raw, (str, bytes)):
                return Session.model_validate_json(raw)
            return Session.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable session record under {self._key!r}: {e.error_count()} error(s)")
            return None

    def clear(self) -> None:
        self._storage.pop(self._key, None)
