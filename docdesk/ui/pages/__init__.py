"""Page registrations. Importing this package registers every route."""

from docdesk.ui.pages import analyze, auth, chat, dashboard, documents, settings, users

__all__ = ["analyze", "auth", "chat", "dashboard", "documents", "settings", "users"]
