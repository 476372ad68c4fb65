"""Application configuration with environment variable loading.

Pydantic-based configuration for the browser front end and its backend
client. Values come from the process environment or a .env file.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


def _timeout_from_env() -> float | None:
    raw = os.getenv("REQUEST_TIMEOUT", "").strip()
    return float(raw) if raw else None


class AppConfig(BaseModel):
    """Configuration for the DocDesk front end.

    Attributes:
        api_base_url: Base URL of the document backend.
        storage_secret: Secret used by NiceGUI to sign per-browser storage.
        request_timeout: Seconds before a backend call is abandoned (None waits forever).
        login_route: Page visitors are sent to when not signed in.
        public_prefix: Route prefix reachable without a session.
        home_route: Landing page after a successful login.
    """

    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:3000"),
        description="Document backend base URL",
    )
    storage_secret: str = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET", "docdesk-secret"),
        description="Secret for NiceGUI user storage",
    )
    request_timeout: float | None = Field(
        default_factory=_timeout_from_env,
        gt=0,
        description="Backend request timeout in seconds",
    )
    login_route: str = Field(default="/auth/login", description="Login page route")
    public_prefix: str = Field(default="/auth", description="Routes open without a session")
    home_route: str = Field(default="/home/documents", description="Landing page after login")

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("login_route", "public_prefix", "home_route")
    @classmethod
    def validate_route(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("Routes must start with '/'")
        return v


def get_config() -> AppConfig:
    """Create application configuration from environment.

    Returns:
        Configured AppConfig instance.

    Raises:
        ValueError: If API_BASE_URL is not an http(s) URL.
    """
    return AppConfig()
