"""Session persistence and the login/signup/logout lifecycle."""

from pdfchat.session.manager import AuthSessionManager
from pdfchat.session.store import SessionStore

__all__ = ["AuthSessionManager", "SessionStore"]
