"""HTTP access to the PDF Chat backend.

Endpoints consumed:
    - POST /api/v1/auth/login/access-token: Form-encoded credentials for a token
    - POST /api/v1/auth/signup: Account registration
    - POST /api/v1/pdfs/upload-pdf: Document ingestion (bearer token)
    - POST /api/v1/pdfs/query: Question answering (bearer token)
"""

from pdfchat.api.client import BackendClient

__all__ = ["BackendClient"]
