"""Error types raised by backend calls.

Every failure carries a message fit to show in a notification.
"""

import httpx


class ApiError(Exception):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response, action: str) -> "ApiError":
        """Build an error from a failed response.

        Args:
            response: The failed backend response.
            action: What was being attempted, e.g. "updating document".

        Returns:
            ApiError whose message names the action, status and backend detail.
        """
        detail = describe_failure(response)
        message = f"Error {action}: {response.status_code}"
        if detail:
            message = f"{message} - {detail}"
        return cls(message, response.status_code)


class SessionExpiredError(ApiError):
    """The backend rejected the credential. The session has already been cleared."""


class NotAuthenticatedError(ApiError):
    """A protected call was attempted without a credential."""


class InvalidCredentialsError(ApiError):
    """Login rejected the email/password pair."""


class ConflictError(ApiError):
    """The backend reported a duplicate (username or email)."""


class ApiConnectionError(ApiError):
    """The backend could not be reached."""


class DocumentOperationError(ApiError):
    """A document operation (update, delete, upload, analysis) failed."""


def describe_failure(response: httpx.Response) -> str:
    """Extract the backend's explanation from an error body.

    Tries the JSON ``message`` and ``detail`` fields before falling back
    to the raw body text.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()

    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, list):
                value = "; ".join(str(item) for item in value)
            if value:
                return str(value)
    return response.text.strip()
