"""cookielite exception hierarchy.

Shared across the codec and the jar so callers can catch one base type.
"""

from dataclasses import dataclass


class CookieError(Exception):
    """Base for all cookielite-specific errors."""


@dataclass(frozen=True, slots=True)
class MalformedCookieError(CookieError, ValueError):
    """A cookie string held no extractable ``name[=value]`` pair.

    Raised by ``CookieJar.set_cookie`` before anything is stored.
    """

    cookie_string: str
    detail: str = "no name/value pair found"

    def __str__(self) -> str:
        return f"{self.detail}: {self.cookie_string!r}"


class InvalidCookieNameError(CookieError, ValueError):
    """Cookie name must be a non-empty string."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Cookie name must be a non-empty string, got {name!r}")
        self.name = name
