"""Session Store: who is signed in.

Holds the credential and identity in memory and mirrors them to durable
storage, restoring them when a page is built. Expiry is never checked here;
the backend reports it with a 401 and the API client calls ``logout``.
"""

import logging
from typing import Any

from pydantic import ValidationError

from docdesk.models.schemas import AuthResponse, Identity
from docdesk.session.storage import DurableStorage, StorageKeys

logger = logging.getLogger(__name__)


class SessionStore:
    """Credential and identity for one browser session.

    Attributes:
        storage: Durable mapping the session is mirrored to.
    """

    def __init__(self, storage: DurableStorage) -> None:
        self.storage = storage
        self._token: str | None = None
        self._user: Identity | None = None
        self._restore()

    def _restore(self) -> None:
        token = self.storage.get(StorageKeys.ACCESS_TOKEN)
        raw_user = self.storage.get(StorageKeys.USER)
        if not token or not raw_user:
            return

        try:
            user = Identity.model_validate_json(raw_user)
        except (ValidationError, TypeError) as e:
            logger.warning(f"Discarding unreadable stored session: {e}")
            self._clear_storage()
            return

        self._token = token
        self._user = user
        logger.debug(f"Restored session for user {user.id}")

    @property
    def token(self) -> str | None:
        """The bearer credential, or None when signed out."""
        return self._token

    @property
    def user(self) -> Identity | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def login(self, response: AuthResponse | dict[str, Any]) -> Identity:
        """Store a successful login in memory and durable storage.

        Args:
            response: Login payload with ``access_token`` and ``user``.

        Returns:
            The signed-in identity.
        """
        auth = AuthResponse.model_validate(response)
        self._token = auth.access_token
        self._user = auth.user
        self.storage[StorageKeys.ACCESS_TOKEN] = auth.access_token
        self.storage[StorageKeys.USER] = auth.user.model_dump_json()
        logger.info(f"User {auth.user.id} signed in")
        return auth.user

    def logout(self) -> None:
        """Forget the session in memory and durable storage."""
        user_id = self._user.id if self._user else None
        self._token = None
        self._user = None
        self._clear_storage()
        if user_id is not None:
            logger.info(f"User {user_id} signed out")

    def update_identity(self, **changes: Any) -> Identity:
        """Apply a local profile change after the backend accepted it.

        Args:
            **changes: Identity fields to replace (username, email, role).

        Returns:
            The updated identity.

        Raises:
            RuntimeError: If nobody is signed in.
        """
        if self._user is None:
            raise RuntimeError("No signed-in user to update")

        data = self._user.model_dump()
        data.update({k: v for k, v in changes.items() if v is not None})
        self._user = Identity.model_validate(data)
        self.storage[StorageKeys.USER] = self._user.model_dump_json()
        return self._user

    def _clear_storage(self) -> None:
        # token first, then identity
        self.storage.pop(StorageKeys.ACCESS_TOKEN, None)
        self.storage.pop(StorageKeys.USER, None)

