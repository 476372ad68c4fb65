"""Per-page wiring of the session, gate, client and services."""

from dataclasses import dataclass

from nicegui import app, ui

from docdesk.client.api import ApiClient
from docdesk.client.auth import AuthService
from docdesk.client.chat import ChatService
from docdesk.client.errors import ApiError, SessionExpiredError
from docdesk.config import AppConfig, get_config
from docdesk.session.gate import AccessGate
from docdesk.session.preferences import Preferences
from docdesk.session.store import SessionStore
from docdesk.sync.documents import DocumentSync
from docdesk.sync.users import UserSync
from docdesk.ui.i18n import translate


class BrowserNavigator:
    """Navigates the current browser tab."""

    def navigate(self, path: str) -> None:
        ui.navigate.to(path)


@dataclass
class AppContext:
    """Everything a page needs for one browser session."""

    config: AppConfig
    session: SessionStore
    preferences: Preferences
    gate: AccessGate
    client: ApiClient
    auth: AuthService
    documents: DocumentSync
    users: UserSync
    chat: ChatService

    def t(self, key: str, **values: str) -> str:
        return translate(key, self.preferences.language, **values)


def build_context(config: AppConfig | None = None) -> AppContext:
    """Build the context for the page being rendered.

    Must be called inside a NiceGUI page function, where ``app.storage.user``
    refers to the visiting browser.
    """
    config = config or get_config()
    storage = app.storage.user
    navigator = BrowserNavigator()
    session = SessionStore(storage)
    client = ApiClient(config, session, navigator)
    return AppContext(
        config=config,
        session=session,
        preferences=Preferences(storage),
        gate=AccessGate(
            session,
            navigator,
            login_route=config.login_route,
            public_prefix=config.public_prefix,
            home_route=config.home_route,
        ),
        client=client,
        auth=AuthService(client, session),
        documents=DocumentSync(client, session),
        users=UserSync(client, session),
        chat=ChatService(client),
    )


def notify_error(error: ApiError) -> None:
    """Show a failed call. Expired sessions are already being redirected."""
    if isinstance(error, SessionExpiredError):
        ui.notify(error.message, type="warning")
        return
    ui.notify(error.message, type="negative")
