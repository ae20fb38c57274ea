"""Tests for switchback.config — RouterConfig defaults and immutability."""

import pytest

from switchback.config import RouterConfig
from switchback.errors import ConfigurationError


class TestRouterConfig:
    def test_defaults(self) -> None:
        config = RouterConfig()
        assert config.not_found_body == "page not found"
        assert config.not_found_status == 404
        assert config.debug is False

    def test_override(self) -> None:
        config = RouterConfig(debug=True, not_found_body="missing")
        assert config.debug is True
        assert config.not_found_body == "missing"

    def test_frozen(self) -> None:
        config = RouterConfig()
        with pytest.raises(AttributeError):
            config.debug = True  # type: ignore[misc]

    @pytest.mark.parametrize("status", [200, 302, 399, 600])
    def test_rejects_non_error_not_found_status(self, status: int) -> None:
        with pytest.raises(ConfigurationError, match="4xx or 5xx"):
            RouterConfig(not_found_status=status)
