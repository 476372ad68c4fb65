"""HTTP access to the document backend.

Responsibilities:
    - Attach the session's bearer credential to protected calls
    - Turn a 401 into logout plus redirect, the same way for every call
    - Map failed responses to typed errors with readable messages
    - Authentication (login/register) and document chat

Contains no UI code. Pages catch the errors and show notifications.
"""

from docdesk.client.api import ApiClient
from docdesk.client.auth import AuthService
from docdesk.client.chat import ChatService, extract_answer
from docdesk.client.errors import (
    ApiConnectionError,
    ApiError,
    ConflictError,
    DocumentOperationError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    SessionExpiredError,
)

__all__ = [
    "ApiClient",
    "ApiConnectionError",
    "ApiError",
    "AuthService",
    "ChatService",
    "ConflictError",
    "DocumentOperationError",
    "InvalidCredentialsError",
    "NotAuthenticatedError",
    "SessionExpiredError",
    "extract_answer",
]
