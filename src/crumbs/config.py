"""Cookie handling configuration.

CookiesConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from crumbs.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class CookiesConfig:
    """Cookie handling configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = CookiesConfig(set_cookie_header="X-Set-Cookie")
    """

    # Response header the mutable view publishes modified cookies to
    set_cookie_header: str = "Set-Cookie"

    # Request header RequestCookies parses on construction
    cookie_header: str = "cookie"

    def __post_init__(self) -> None:
        if not self.set_cookie_header:
            msg = "CookiesConfig.set_cookie_header must not be empty."
            raise ConfigurationError(msg)
        if not self.cookie_header:
            msg = "CookiesConfig.cookie_header must not be empty."
            raise ConfigurationError(msg)


DEFAULT_CONFIG = CookiesConfig()
