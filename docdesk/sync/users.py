"""User list and profile updates.

Administrators manage accounts through ``/users``; every user can edit their
own username and email.
"""

import logging
from typing import Any

from docdesk.models.schemas import Identity, Role, UserCreate, UserUpdate
from docdesk.sync.base import ResourceSync

logger = logging.getLogger(__name__)


class UserSync(ResourceSync[Identity]):
    """Users known to the backend."""

    path = "/users"
    model = Identity
    label = "users"

    @property
    def users(self) -> list[Identity]:
        return self.items

    def get_by_id(self, user_id: str) -> Identity | None:
        return next((u for u in self.items if u.id == user_id), None)

    def username_for(self, user_id: str) -> str:
        """Username for display, or a shortened id when the user is unknown."""
        user = self.get_by_id(user_id)
        if user is not None:
            return user.username
        return user_id[:8] + "..."

    async def create(self, user: UserCreate | dict[str, Any]) -> None:
        payload = UserCreate.model_validate(user)
        await self._mutate(
            "POST", self.path, action="creating user", json=payload.model_dump(mode="json")
        )
        logger.info(f"Created user {payload.username}")
        await self.fetch_all()

    async def update_role(self, user_id: str, role: Role | str) -> None:
        payload = UserUpdate(role=Role(role))
        await self._mutate(
            "PATCH",
            f"{self.path}/{user_id}",
            action="updating role",
            json=payload.model_dump(mode="json", exclude_none=True),
        )
        await self.fetch_all()

    async def delete(self, user_id: str) -> None:
        await self._mutate("DELETE", f"{self.path}/{user_id}", action="deleting user")
        logger.info(f"Deleted user {user_id}")
        await self.fetch_all()

    async def update_profile(self, username: str, email: str) -> Identity:
        """Change the signed-in user's username and email.

        The stored identity is updated locally once the backend accepts the
        change; it is not re-read from the server.

        Returns:
            The updated identity.

        Raises:
            RuntimeError: If nobody is signed in.
            ApiError: If the backend rejects the change.
        """
        user = self.session.user
        if user is None:
            raise RuntimeError("No signed-in user to update")

        payload = UserUpdate(username=username.strip(), email=email.strip())
        await self._mutate(
            "PATCH",
            f"{self.path}/{user.id}",
            action="updating profile",
            json=payload.model_dump(mode="json", exclude_none=True),
        )
        return self.session.update_identity(username=payload.username, email=payload.email)
