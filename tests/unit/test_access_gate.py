"""Unit tests for AccessGate."""

import pytest
import pytest_check as check

from docdesk.models.schemas import Role
from docdesk.session.gate import AccessGate
from docdesk.session.store import SessionStore


@pytest.fixture
def gate(session: SessionStore, navigator) -> AccessGate:
    return AccessGate(session, navigator)


class TestAccessGate:
    """Tests for redirecting visitors without a session."""

    def test_unauthenticated_protected_path_redirects(self, gate: AccessGate, navigator) -> None:
        """Protected page without a session redirects to login and withholds content."""
        allowed = gate.check("/home/documents")

        check.is_false(allowed)
        check.equal(navigator.paths, ["/auth/login"])

    def test_unauthenticated_public_path_renders(self, gate: AccessGate, navigator) -> None:
        """Auth pages render without a session."""
        check.is_true(gate.check("/auth/login"))
        check.is_true(gate.check("/auth/register"))
        check.is_true(gate.check("/auth"))
        check.equal(navigator.paths, [])

    def test_prefix_match_is_per_segment(self, gate: AccessGate, navigator) -> None:
        """A path merely starting with the same letters is not public."""
        assert gate.check("/authors") is False

    def test_authenticated_renders_everything(self, gate: AccessGate, signed_in, navigator) -> None:
        """A signed-in user sees every page without a redirect."""
        check.is_true(gate.check("/home/documents"))
        check.is_true(gate.check("/auth/login"))
        check.equal(navigator.paths, [])

    def test_reacts_to_logout(self, gate: AccessGate, signed_in: SessionStore, navigator) -> None:
        """The gate reads the session on every check."""
        assert gate.check("/home/config") is True

        signed_in.logout()

        check.is_false(gate.check("/home/config"))
        check.equal(navigator.paths, ["/auth/login"])

    def test_custom_routes(self, session: SessionStore, navigator) -> None:
        """Configured login route and public prefix are honored."""
        gate = AccessGate(session, navigator, login_route="/signin", public_prefix="/public/")

        check.is_true(gate.check("/public/about"))
        check.is_false(gate.check("/private"))
        check.equal(navigator.paths, ["/signin"])


class TestRequireRole:
    """Tests for role-restricted pages."""

    def test_employee_is_sent_home(self, gate: AccessGate, signed_in, navigator) -> None:
        """Non-admin users are redirected to the home route."""
        check.is_false(gate.require_role(Role.ADMIN))
        check.equal(navigator.paths, ["/home/documents"])

    def test_admin_is_allowed(self, gate: AccessGate, session: SessionStore, auth_payload: dict, navigator) -> None:
        """Admins pass the role check without navigating."""
        auth_payload["user"]["role"] = "admin"
        session.login(auth_payload)

        check.is_true(gate.require_role(Role.ADMIN))
        check.equal(navigator.paths, [])

    def test_signed_out_is_sent_to_login(self, gate: AccessGate, navigator) -> None:
        """Role check without a session redirects to login."""
        check.is_false(gate.require_role(Role.ADMIN))
        check.equal(navigator.paths, ["/auth/login"])
