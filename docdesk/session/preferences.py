"""Interface preferences kept in durable storage."""

import logging

from docdesk.session.storage import DurableStorage, StorageKeys

logger = logging.getLogger(__name__)

LANGUAGES = {"es": "Español", "en": "English"}
DEFAULT_LANGUAGE = "es"


class Preferences:
    """Dark mode and language for one browser.

    Values are stored as strings (``"true"``/``"false"`` and a language
    code) so they read the same way whichever page wrote them.
    """

    def __init__(self, storage: DurableStorage) -> None:
        self.storage = storage

    @property
    def dark_mode(self) -> bool:
        # light mode unless explicitly saved as dark
        return self.storage.get(StorageKeys.DARK_MODE) == "true"

    def set_dark_mode(self, value: bool) -> None:
        self.storage[StorageKeys.DARK_MODE] = "true" if value else "false"

    def toggle_dark_mode(self) -> bool:
        self.set_dark_mode(not self.dark_mode)
        return self.dark_mode

    @property
    def language(self) -> str:
        value = self.storage.get(StorageKeys.LANGUAGE)
        return value if value in LANGUAGES else DEFAULT_LANGUAGE

    def set_language(self, value: str) -> None:
        """Persist the interface language.

        Raises:
            ValueError: If the language is not supported.
        """
        if value not in LANGUAGES:
            raise ValueError(f"Unsupported language: {value!r}")
        self.storage[StorageKeys.LANGUAGE] = value
        logger.debug(f"Language set to {value}")
