"""PDF Chat - authenticated question answering over an uploaded document.

Client side of a document Q&A service: signs the user in, uploads a single
PDF to the backend and holds a conversation about it.

Components:
    - session: session persistence and the login/signup/logout lifecycle
    - navigation: page state machine driven by session presence
    - documents: the active document and its upload lifecycle
    - chat: ordered message history and query dispatch
    - api: HTTP client for the backend endpoints
    - ui: NiceGUI pages bound to the components above
"""

__version__ = "0.1.0"
