"""Path pattern compilation.

Turns a template like ``/users/:id`` into an immutable ``Pattern`` that
tests concrete request paths and extracts named parameters.

Template syntax::

    /users            literal text, matched verbatim
    /users/:id        named parameter, one non-empty segment
    /files/:name.txt  parameter followed by literal text in a segment
    /static/*         wildcard, any remainder including '/', bound to "0"
    /a\\:b            backslash escapes the next character
"""

import re
from dataclasses import dataclass, field
from urllib.parse import SplitResult, quote, unquote, urlsplit

from switchback.errors import PatternError

_PARAM_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Grouping and query syntax the compiler does not support
_RESERVED = frozenset("(){}?#")

_SEGMENT = r"([^/]+?)"
_WILDCARD = r"(.*)"

# Left unencoded when literal text is normalized to its on-the-wire form
_LITERAL_SAFE = "/!$&'()*+,;=:@-._~%"


@dataclass(frozen=True, slots=True)
class Pattern:
    """A compiled path template. Build with ``compile_path()``.

    Evaluation never mutates the pattern, so one instance can be shared
    by every concurrent request.
    """

    template: str
    _regex: re.Pattern[str] = field(repr=False, compare=False)
    _names: tuple[str, ...] = field(repr=False, compare=False)

    @property
    def param_names(self) -> tuple[str, ...]:
        """Parameter names in template order (wildcards as "0", "1", ...)."""
        return self._names

    def match(self, path: str | SplitResult) -> dict[str, str] | None:
        """Test *path* and return its bindings, or None on no match.

        Accepts a path, a path with query string, a full URL string, or a
        parsed ``SplitResult``. Only the path component is compared.
        Captured values are percent-decoded.
        """
        candidate = _path_of(path)
        if candidate is None:
            return None
        found = self._regex.fullmatch(candidate)
        if found is None:
            return None
        # Later bindings of a repeated name win
        return {name: unquote(value) for name, value in zip(self._names, found.groups(), strict=True)}

    def matches(self, path: str | SplitResult) -> bool:
        """True if *path* matches this pattern."""
        return self.match(path) is not None


def _path_of(value: str | SplitResult) -> str | None:
    if isinstance(value, SplitResult):
        return value.path
    if value.startswith("/"):
        return value.partition("#")[0].partition("?")[0]
    try:
        return urlsplit(value).path
    except ValueError:
        return None


def compile_path(template: str) -> Pattern:
    """Compile *template* into a ``Pattern``.

    Raises ``PatternError`` when the template is empty, does not start
    with ``/``, has a ``:`` without a valid name after it, ends with a
    dangling backslash, or uses unsupported grouping syntax.

    Examples::

        compile_path("/hello")
        compile_path("/users/:id")
    """
    if not template:
        raise PatternError(template, "template is empty")
    if not template.startswith("/"):
        raise PatternError(template, "template must start with '/'")

    parts: list[str] = []
    names: list[str] = []
    literal: list[str] = []
    wildcards = 0

    def flush() -> None:
        if literal:
            parts.append(re.escape(quote("".join(literal), safe=_LITERAL_SAFE)))
            literal.clear()

    index = 0
    while index < len(template):
        char = template[index]
        if char == "\\":
            if index + 1 == len(template):
                raise PatternError(template, "dangling escape at end of template")
            literal.append(template[index + 1])
            index += 2
        elif char == ":":
            name = _PARAM_NAME.match(template, index + 1)
            if name is None:
                raise PatternError(template, f"missing parameter name after ':' at position {index}")
            flush()
            parts.append(_SEGMENT)
            names.append(name.group())
            index = name.end()
        elif char == "*":
            flush()
            parts.append(_WILDCARD)
            names.append(str(wildcards))
            wildcards += 1
            index += 1
        elif char in _RESERVED:
            raise PatternError(template, f"unsupported character {char!r} at position {index}")
        else:
            literal.append(char)
            index += 1
    flush()

    return Pattern(template=template, _regex=re.compile("".join(parts)), _names=tuple(names))


# Public name used in route tables: router.get(path("/hello"), handler)
path = compile_path
