"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from switchback.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(debug=True)
    """

    # Fallback response when no route matches
    not_found_body: str = "page not found"
    not_found_status: int = 404

    # Append exception text to 500 bodies produced by the ASGI adapter
    debug: bool = False

    def __post_init__(self) -> None:
        if not 400 <= self.not_found_status < 600:
            msg = f"not_found_status must be 4xx or 5xx, got {self.not_found_status}"
            raise ConfigurationError(msg)
