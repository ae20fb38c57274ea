"""Tests for switchback.errors — exception hierarchy and messages."""

from switchback.errors import ConfigurationError, PatternError, SwitchbackError, URLParseError


class TestHierarchy:
    def test_configuration_error_is_switchback_error(self) -> None:
        assert issubclass(ConfigurationError, SwitchbackError)

    def test_pattern_error_is_configuration_error(self) -> None:
        assert issubclass(PatternError, ConfigurationError)

    def test_url_parse_error_is_not_configuration_error(self) -> None:
        assert issubclass(URLParseError, SwitchbackError)
        assert not issubclass(URLParseError, ConfigurationError)


class TestPatternError:
    def test_attributes_and_message(self) -> None:
        err = PatternError("/users/:", "missing parameter name")
        assert err.template == "/users/:"
        assert err.reason == "missing parameter name"
        assert str(err) == "failed to parse route pattern '/users/:': missing parameter name"


class TestURLParseError:
    def test_message_with_reason(self) -> None:
        err = URLParseError("users", "path must start with '/'")
        assert err.url == "users"
        assert str(err) == "invalid request URL 'users': path must start with '/'"

    def test_message_without_reason(self) -> None:
        assert str(URLParseError("x")) == "invalid request URL 'x'"
