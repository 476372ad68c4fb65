"""Unit tests for AppConfig."""

import pytest
import pytest_check as check
from pydantic import ValidationError

from docdesk.config import AppConfig, get_config


class TestAppConfig:
    """Tests for AppConfig validation."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults apply when the environment is empty."""
        monkeypatch.delenv("API_BASE_URL", raising=False)
        monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)

        config = get_config()

        check.equal(config.api_base_url, "http://localhost:3000")
        check.is_none(config.request_timeout)
        check.equal(config.login_route, "/auth/login")
        check.equal(config.public_prefix, "/auth")

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Values come from environment variables."""
        monkeypatch.setenv("API_BASE_URL", "https://api.example.com/")
        monkeypatch.setenv("REQUEST_TIMEOUT", "15")
        monkeypatch.setenv("NICEGUI_STORAGE_SECRET", "s3cret")

        config = AppConfig()

        check.equal(config.api_base_url, "https://api.example.com")
        check.equal(config.request_timeout, 15.0)
        check.equal(config.storage_secret, "s3cret")

    def test_rejects_non_http_url(self) -> None:
        """Backend URL must be http or https."""
        with pytest.raises(ValidationError) as exc_info:
            AppConfig(api_base_url="localhost:3000")

        assert "http://" in str(exc_info.value)

    def test_rejects_non_positive_timeout(self) -> None:
        """Timeout must be positive."""
        with pytest.raises(ValidationError):
            AppConfig(request_timeout=0)

    def test_rejects_relative_route(self) -> None:
        """Routes must start with a slash."""
        with pytest.raises(ValidationError):
            AppConfig(login_route="auth/login")
