"""Tests for switchback.routing.pattern — template compilation and matching."""

from urllib.parse import urlsplit

import pytest

from switchback.errors import ConfigurationError, PatternError
from switchback.routing.pattern import Pattern, compile_path, path


class TestLiteralTemplates:
    def test_exact_match(self) -> None:
        pattern = compile_path("/hello")
        assert pattern.match("/hello") == {}
        assert pattern.matches("/hello") is True

    def test_other_path_does_not_match(self) -> None:
        pattern = compile_path("/hello")
        assert pattern.match("/goodbye") is None
        assert pattern.matches("/hello/world") is False

    def test_trailing_slash_is_significant(self) -> None:
        assert compile_path("/hello").matches("/hello/") is False
        assert compile_path("/hello/").matches("/hello") is False

    def test_root(self) -> None:
        pattern = compile_path("/")
        assert pattern.matches("/") is True
        assert pattern.matches("/hello") is False

    def test_non_ascii_literal_matches_encoded_path(self) -> None:
        assert compile_path("/café").matches("/caf%C3%A9") is True

    def test_regex_metacharacters_are_literal(self) -> None:
        pattern = compile_path("/v1.0/items+")
        assert pattern.matches("/v1.0/items+") is True
        assert pattern.matches("/v1x0/items+") is False

    def test_escaped_colon_is_literal(self) -> None:
        pattern = compile_path(r"/time\:now")
        assert pattern.match("/time:now") == {}
        assert pattern.param_names == ()


class TestNamedParameters:
    def test_single_param(self) -> None:
        assert compile_path("/users/:id").match("/users/42") == {"id": "42"}

    def test_param_requires_non_empty_segment(self) -> None:
        assert compile_path("/users/:id").match("/users/") is None

    def test_param_does_not_cross_segments(self) -> None:
        assert compile_path("/users/:id").match("/users/42/posts") is None

    def test_multiple_params(self) -> None:
        pattern = compile_path("/users/:user_id/posts/:post_id")
        assert pattern.match("/users/1/posts/99") == {"user_id": "1", "post_id": "99"}
        assert pattern.param_names == ("user_id", "post_id")

    def test_param_followed_by_literal(self) -> None:
        pattern = compile_path("/files/:name.json")
        assert pattern.match("/files/report.json") == {"name": "report"}
        assert pattern.match("/files/report.xml") is None

    def test_values_are_percent_decoded(self) -> None:
        pattern = compile_path("/users/:name")
        assert pattern.match("/users/J%C3%BCrgen") == {"name": "Jürgen"}

    def test_repeated_name_last_binding_wins(self) -> None:
        assert compile_path("/:id/:id").match("/1/2") == {"id": "2"}


class TestWildcards:
    def test_wildcard_spans_segments(self) -> None:
        pattern = compile_path("/static/*")
        assert pattern.match("/static/css/site.css") == {"0": "css/site.css"}

    def test_wildcard_may_be_empty(self) -> None:
        assert compile_path("/static/*").match("/static/") == {"0": ""}

    def test_wildcards_numbered_in_order(self) -> None:
        pattern = compile_path("/*/raw/*")
        assert pattern.match("/a/b/raw/c") == {"0": "a/b", "1": "c"}
        assert pattern.param_names == ("0", "1")


class TestMatchInputs:
    def test_query_string_ignored(self) -> None:
        assert compile_path("/hello").matches("/hello?name=world") is True

    def test_fragment_ignored(self) -> None:
        assert compile_path("/hello").matches("/hello#top") is True

    def test_full_url(self) -> None:
        pattern = compile_path("/users/:id")
        assert pattern.match("https://example.com/users/7?x=1") == {"id": "7"}

    def test_split_result(self) -> None:
        url = urlsplit("http://localhost/users/7")
        assert compile_path("/users/:id").match(url) == {"id": "7"}

    def test_unparseable_url_is_no_match(self) -> None:
        assert compile_path("/users").match("http://[::1/users") is None


class TestMalformedTemplates:
    @pytest.mark.parametrize(
        "template",
        [
            "",
            "hello",
            "/users/:",
            "/users/:1st",
            "/users/(\\d+)",
            "/users/{id}",
            "/search?q",
            "/dangling\\",
        ],
    )
    def test_rejected(self, template: str) -> None:
        with pytest.raises(PatternError):
            compile_path(template)

    def test_error_names_template_and_reason(self) -> None:
        with pytest.raises(PatternError) as exc_info:
            compile_path("/users/:")
        err = exc_info.value
        assert err.template == "/users/:"
        assert "missing parameter name" in err.reason
        assert "/users/:" in str(err)

    def test_pattern_error_is_configuration_error(self) -> None:
        assert issubclass(PatternError, ConfigurationError)


class TestPatternValue:
    def test_compilation_is_idempotent(self) -> None:
        first = compile_path("/users/:id/*")
        second = compile_path("/users/:id/*")
        assert first == second
        assert hash(first) == hash(second)
        for candidate in ["/users/1/a", "/users/", "/users/x/y/z", "/other"]:
            assert first.match(candidate) == second.match(candidate)

    def test_different_templates_are_unequal(self) -> None:
        assert compile_path("/a") != compile_path("/b")

    def test_frozen(self) -> None:
        pattern = compile_path("/hello")
        with pytest.raises(AttributeError):
            pattern.template = "/other"  # type: ignore[misc]

    def test_repr_shows_template(self) -> None:
        assert "/users/:id" in repr(compile_path("/users/:id"))

    def test_path_alias(self) -> None:
        assert path is compile_path
        assert isinstance(path("/hello"), Pattern)
