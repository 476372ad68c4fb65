"""Durable storage keys shared by the session and preference stores.

In the browser the backing mapping is NiceGUI's ``app.storage.user``, which
survives page reloads for the same browser. Tests pass a plain dict.
"""

from collections.abc import MutableMapping
from typing import Any

DurableStorage = MutableMapping[str, Any]


class StorageKeys:
    """Key names in durable storage."""

    ACCESS_TOKEN = "access_token"
    USER = "user"
    DARK_MODE = "darkMode"
    LANGUAGE = "language"
