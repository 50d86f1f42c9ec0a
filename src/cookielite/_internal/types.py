"""Shared type aliases used across cookielite modules."""

from collections.abc import Callable
from typing import TypeAlias

# Decoded cookie pairs: a valueless flag maps to None
CookieMapping: TypeAlias = dict[str, str | None]

# Wall clock returning POSIX seconds (``time.time`` by default)
Clock: TypeAlias = Callable[[], float]
