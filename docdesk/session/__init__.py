"""Client-side session state.

Responsibilities:
    - Session Store: credential and identity, persisted per browser
    - Preferences: dark mode and interface language
    - Access Gate: redirects visitors without a session to the login page

Every page builds its own instances over the browser's durable storage, so
independent sessions never share state.
"""

from docdesk.session.gate import AccessGate, Navigator
from docdesk.session.preferences import Preferences
from docdesk.session.store import SessionStore
from docdesk.session.storage import StorageKeys

__all__ = ["AccessGate", "Navigator", "Preferences", "SessionStore", "StorageKeys"]
