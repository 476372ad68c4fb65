"""Access Gate for protected pages.

The gate is advisory: it sends visitors without a session to the login page
but cannot stop a request a page has already started. The backend's 401 is
the real boundary.
"""

import logging
from typing import Protocol

from docdesk.models.schemas import Role
from docdesk.session.store import SessionStore

logger = logging.getLogger(__name__)


class Navigator(Protocol):
    """Client-side navigation."""

    def navigate(self, path: str) -> None: ...


class AccessGate:
    """Decides whether a page may render for the current session.

    Attributes:
        session: Session Store consulted on every check.
        navigator: Used to issue the redirect.
        login_route: Where unauthenticated visitors are sent.
        public_prefix: Routes under this prefix never redirect.
        home_route: Where visitors lacking a role are sent.
    """

    def __init__(
        self,
        session: SessionStore,
        navigator: Navigator,
        login_route: str = "/auth/login",
        public_prefix: str = "/auth",
        home_route: str = "/home/documents",
    ) -> None:
        self.session = session
        self.navigator = navigator
        self.login_route = login_route
        self.public_prefix = public_prefix.rstrip("/")
        self.home_route = home_route

    def is_public(self, path: str) -> bool:
        return path == self.public_prefix or path.startswith(self.public_prefix + "/")

    def check(self, path: str) -> bool:
        """Return True when the page at ``path`` may render its content.

        When False, a redirect to the login route has been issued and the
        caller should show a loading indicator instead.
        """
        if self.session.is_authenticated or self.is_public(path):
            return True

        logger.debug(f"Redirecting unauthenticated visit to {path}")
        self.navigator.navigate(self.login_route)
        return False

    def require_role(self, role: Role) -> bool:
        """Return True when the signed-in user holds ``role``.

        Otherwise redirects to the home route (or to login when signed out).
        """
        user = self.session.user
        if user is None:
            self.navigator.navigate(self.login_route)
            return False
        if user.role is not role:
            logger.warning(f"User {user.id} lacks role {role.value}")
            self.navigator.navigate(self.home_route)
            return False
        return True
