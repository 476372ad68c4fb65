"""Shared fetch/cache/mutate cycle for backend resource lists.

Architecture notes:

1. **Full re-fetch after mutation** - The cache is only ever replaced by a
   server response. A successful mutation is followed by ``fetch_all``.

2. **Generation numbers** - Every ``fetch_all`` takes the next generation.
   When it completes, its result is applied only if no newer fetch has been
   issued since, so a slow, older response can never overwrite a newer one.

3. **Session-owned credential** - The list is fetched only when the Session
   Store holds a credential. Without one the cache is emptied and no request
   is sent; the Access Gate takes care of the redirect.
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from docdesk.client.api import ApiClient
from docdesk.client.errors import ApiError, NotAuthenticatedError, SessionExpiredError
from docdesk.session.store import SessionStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceSync(Generic[ModelT]):
    """Cached list of one backend resource.

    Subclasses set ``path``, ``model`` and ``label`` and may override
    ``order`` to sort fetched items.

    Attributes:
        items: Last list applied from the server.
        loading: True while the newest fetch is in flight.
        error: Message of the newest failed fetch, if any.
    """

    path: str
    model: type[ModelT]
    label: str
    operation_error: type[ApiError] = ApiError

    def __init__(self, client: ApiClient, session: SessionStore) -> None:
        self.client = client
        self.session = session
        self.items: list[ModelT] = []
        self.loading = False
        self.error: str | None = None
        self._generation = 0
        self._listeners: list[Callable[[], None]] = []

    def on_change(self, callback: Callable[[], None]) -> None:
        """Register a callback run after every state change."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in self._listeners:
            callback()

    def order(self, items: list[ModelT]) -> list[ModelT]:
        return items

    def _is_latest(self, generation: int) -> bool:
        if generation == self._generation:
            return True
        logger.debug(
            f"Discarding stale {self.label} response "
            f"(generation {generation}, latest {self._generation})"
        )
        return False

    async def fetch_all(self) -> None:
        """Re-fetch the list and apply it if no newer fetch was issued.

        Never raises. A 401 has already signed the session out and redirected;
        other failures are kept in ``error`` and leave the cache untouched.
        """
        self._generation += 1
        generation = self._generation

        if self.session.token is None:
            self.items = []
            self.loading = False
            self._notify()
            return

        self.loading = True
        self.error = None
        self._notify()

        try:
            data = await self.client.get_json(self.path, action=f"fetching {self.label}")
            items = [self.model.model_validate(item) for item in data]
        except SessionExpiredError:
            if self._is_latest(generation):
                self.loading = False
                self._notify()
            return
        except ApiError as e:
            if self._is_latest(generation):
                logger.error(f"Error fetching {self.label}: {e.message}")
                self.error = e.message
                self.loading = False
                self._notify()
            return
        except (ValidationError, TypeError) as e:
            if self._is_latest(generation):
                logger.error(f"Unexpected {self.label} payload: {e}")
                self.error = f"Unexpected response while fetching {self.label}"
                self.loading = False
                self._notify()
            return

        if not self._is_latest(generation):
            return

        self.items = self.order(items)
        self.loading = False
        self._notify()

    async def _mutate(
        self, method: str, path: str, *, action: str, **kwargs: Any
    ) -> httpx.Response:
        """Send a mutation, mapping failures to ``operation_error``.

        Session failures propagate as they are, after the client has signed
        out and redirected.
        """
        try:
            return await self.client.request(method, path, action=action, **kwargs)
        except (SessionExpiredError, NotAuthenticatedError):
            raise
        except ApiError as e:
            logger.error(f"Error {action}: {e.message}")
            raise self.operation_error(e.message, e.status_code) from e
