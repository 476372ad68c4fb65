"""Backend HTTP client bound to one session.

Architecture notes:

1. **Single credential read path** - The bearer token is always read from the
   Session Store, never from storage directly, so a logout anywhere is seen by
   every later call.

2. **Central 401 handling** - A 401 on a protected call clears the stored
   token, then the stored identity, then navigates to the login route, and
   only then raises ``SessionExpiredError``. Call sites never repeat this.

3. **One AsyncClient per call** - Calls are short and independent; no
   connection state outlives a request. Tests inject an ``httpx`` transport.

4. **No retries** - Every failure is final for that call.
"""

import logging
from typing import Any

import httpx

from docdesk.client.errors import (
    ApiConnectionError,
    ApiError,
    NotAuthenticatedError,
    SessionExpiredError,
)
from docdesk.config import AppConfig
from docdesk.session.gate import Navigator
from docdesk.session.store import SessionStore

logger = logging.getLogger(__name__)


class ApiClient:
    """Calls the document backend on behalf of a session."""

    def __init__(
        self,
        config: AppConfig,
        session: SessionStore,
        navigator: Navigator,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self.session = session
        self.navigator = navigator
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.api_base_url,
            timeout=self.config.request_timeout,
            transport=self._transport,
        )

    def _auth_headers(self) -> dict[str, str]:
        token = self.session.token
        if token is None:
            self.navigator.navigate(self.config.login_route)
            raise NotAuthenticatedError("You need to sign in again", 401)
        return {"Authorization": f"Bearer {token}"}

    def _expire_session(self) -> None:
        logger.info("Backend rejected the session credential, signing out")
        self.session.logout()
        self.navigator.navigate(self.config.login_route)

    async def request(
        self,
        method: str,
        path: str,
        *,
        action: str,
        json: Any = None,
        files: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Send one request and return the successful response.

        Args:
            method: HTTP method.
            path: Path relative to the backend base URL.
            action: Description used in error messages ("fetching documents").
            json: JSON body, if any.
            files: Multipart files, if any. Content-Type is left to httpx so
                the multipart boundary is filled in.
            authenticated: Attach the bearer credential and treat 401 as an
                expired session.

        Returns:
            The 2xx response.

        Raises:
            NotAuthenticatedError: Protected call without a credential.
            SessionExpiredError: Backend answered 401 to a protected call.
            ApiConnectionError: Backend unreachable.
            ApiError: Any other non-2xx response.
        """
        headers = self._auth_headers() if authenticated else {}

        async with self._client() as client:
            try:
                response = await client.request(
                    method, path, headers=headers, json=json, files=files
                )
            except httpx.RequestError as e:
                logger.error(f"{method} {path} failed: {e}")
                raise ApiConnectionError(
                    "Could not connect to the server", None
                ) from e

        if response.status_code == httpx.codes.UNAUTHORIZED and authenticated:
            self._expire_session()
            raise SessionExpiredError("Your session has expired", 401)

        if response.is_error:
            logger.warning(f"{method} {path} returned {response.status_code}")
            raise ApiError.from_response(response, action)

        return response

    async def get_json(self, path: str, *, action: str) -> Any:
        """GET ``path`` and decode the JSON body.

        Raises:
            ApiError: Also when a 2xx body is not JSON, such as a proxy's
                HTML error page.
        """
        response = await self.request("GET", path, action=action)
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"GET {path} returned a non-JSON body: {e}")
            raise ApiError(
                f"Unexpected response while {action}", response.status_code
            ) from e
