"""In-memory cookie jar indexed by domain and path.

Storage is three nested dicts owned top-down::

    domain -> path -> name -> CookieRecord

Levels are created on first write. Expired records are never swept
proactively; reads skip them and (by default) delete them on the way.
Cookies stored under the root path are visible from every path of their
domain, other paths only from that exact path. Domains match exactly.

The jar also keeps a flat, name-keyed store with per-cookie options,
filled by ``set_cookie`` and by ``put_cookie`` directly.

Not thread-safe: share a jar across threads only behind your own lock.
"""

import logging
import time
from dataclasses import dataclass, fields
from datetime import UTC, datetime

from cookielite._internal.types import Clock, CookieMapping
from cookielite.codec import parse
from cookielite.config import JarConfig
from cookielite.errors import InvalidCookieNameError, MalformedCookieError
from cookielite.expires import find_expires

logger = logging.getLogger("cookielite.jar")


@dataclass(frozen=True, slots=True)
class CookieRecord:
    """A stored cookie value. ``expires=None`` means it never expires."""

    value: str | None
    expires: int | None = None


@dataclass(frozen=True, slots=True)
class StoredCookie:
    """A flat-store entry: value plus the options it was stored with."""

    value: str | None
    expires: float | None = None
    path: str = "/"
    domain: str | None = None
    secure: bool = False
    httponly: bool = False


_MATCHABLE = frozenset(f.name for f in fields(StoredCookie)) - {"value", "expires"}


class CookieJar:
    """Cookie store keyed by ``(domain, path, name)``.

    Basic usage::

        jar = CookieJar()
        jar.set_cookie("session=abc123; Expires=Wed, 21 Oct 2026 07:28:00 GMT", "example.com")
        jar.get_cookies("example.com")  # {"session": "abc123"}

    *clock* returns the current POSIX time in seconds and defaults to
    ``time.time``.
    """

    __slots__ = ("_clock", "_config", "_domains", "_flat")

    def __init__(self, config: JarConfig | None = None, *, clock: Clock | None = None) -> None:
        self._config = config or JarConfig()
        self._clock = clock or time.time
        self._domains: dict[str, dict[str, dict[str, CookieRecord]]] = {}
        self._flat: dict[str, StoredCookie] = {}

    @property
    def config(self) -> JarConfig:
        return self._config

    # -- Indexed store --

    def set_cookie(self, cookie_string: str, domain: str, path: str | None = None) -> None:
        """Store the first pair of *cookie_string* under *domain* and *path*.

        Only the first ``name=value`` pair is kept; an ``Expires``
        attribute anywhere in the string sets the expiry. Raises
        ``MalformedCookieError`` when no pair can be extracted.
        """
        if path is None:
            path = self._config.default_path
        pairs = parse(cookie_string)
        if not pairs:
            raise MalformedCookieError(cookie_string)
        name, value = next(iter(pairs.items()))
        expires = find_expires(cookie_string)

        names = self._domains.setdefault(domain, {}).setdefault(path, {})
        names[name] = CookieRecord(value=value, expires=expires)
        logger.debug("Stored cookie %r for %s%s (expires=%s)", name, domain, path, expires)

        self.put_cookie(name, value, expires=expires, path=path, domain=domain)

    def get_cookies(self, domain: str, path: str | None = None) -> CookieMapping:
        """Return live cookies visible from *path* on *domain*.

        Root-path cookies come first; a same-named cookie stored under
        *path* itself shadows them. Unknown domains give ``{}``.
        """
        if path is None:
            path = self._config.default_path
        paths = self._domains.get(domain)
        if paths is None:
            return {}

        root = self._config.root_path
        lookup = [root] if path == root else [root, path]
        now = self._clock()
        result: CookieMapping = {}
        for key in lookup:
            names = paths.get(key)
            if names is None:
                continue
            expired: list[str] = []
            for name, record in names.items():
                if record.expires is not None and record.expires < now:
                    expired.append(name)
                else:
                    result[name] = record.value
            if expired and self._config.evict_on_read:
                self._evict(domain, key, expired)
        return result

    def clear_cookies(self, domain: str) -> None:
        """Remove every cookie stored for *domain*."""
        self._domains.pop(domain, None)
        for name in [n for n, c in self._flat.items() if c.domain == domain]:
            del self._flat[name]
        logger.debug("Cleared cookies for %s", domain)

    def clear(self) -> None:
        """Remove all cookies."""
        self._domains.clear()
        self._flat.clear()

    def is_expired(self, expires: float | None) -> bool:
        """True when *expires* is set and lies before the current time."""
        return expires is not None and expires < self._clock()

    def domains(self) -> tuple[str, ...]:
        """Domains currently holding at least one stored record."""
        return tuple(self._domains)

    def _evict(self, domain: str, path: str, names: list[str]) -> None:
        paths = self._domains[domain]
        records = paths[path]
        for name in names:
            del records[name]
        if not records:
            del paths[path]
        if not paths:
            del self._domains[domain]
        logger.debug("Evicted %d expired cookie(s) from %s%s", len(names), domain, path)

    # -- Flat store --

    def put_cookie(
        self,
        name: str,
        value: str | None,
        *,
        expires: datetime | float | None = None,
        path: str = "/",
        domain: str | None = None,
        secure: bool = False,
        httponly: bool = False,
    ) -> None:
        """Store *value* under *name* in the flat store, replacing any previous one.

        *expires* may be a ``datetime`` or POSIX seconds. Naive datetimes are
        taken as UTC.
        """
        if not name or not isinstance(name, str):
            raise InvalidCookieNameError(name)
        if isinstance(expires, datetime):
            if expires.tzinfo is None:
                expires = expires.replace(tzinfo=UTC)
            expires = expires.timestamp()
        self._flat[name] = StoredCookie(
            value=value,
            expires=expires,
            path=path or "/",
            domain=domain,
            secure=secure,
            httponly=httponly,
        )
        self._remove_expired()

    def get_cookie(self, name: str, **match: object) -> str | None:
        """Return the flat-store value for *name*.

        Keyword arguments (``path``, ``domain``, ``secure``, ``httponly``)
        must all equal the stored options, otherwise ``None`` is returned.
        """
        unknown = set(match) - _MATCHABLE
        if unknown:
            msg = f"get_cookie() got unexpected match option(s): {', '.join(sorted(unknown))}"
            raise TypeError(msg)
        self._remove_expired()
        cookie = self._flat.get(name)
        if cookie is None:
            return None
        for option, expected in match.items():
            if getattr(cookie, option) != expected:
                return None
        return cookie.value

    def remove_cookie(self, name: str) -> None:
        """Drop *name* from the flat store. Missing names are ignored."""
        self._flat.pop(name, None)

    def get_all_cookies(self) -> CookieMapping:
        """Return every live flat-store cookie as a name-value dict."""
        self._remove_expired()
        return {name: cookie.value for name, cookie in self._flat.items()}

    def _remove_expired(self) -> None:
        now = self._clock()
        expired = [
            name
            for name, cookie in self._flat.items()
            if cookie.expires is not None and now > cookie.expires
        ]
        for name in expired:
            del self._flat[name]

    # -- Container protocol --

    def __len__(self) -> int:
        now = self._clock()
        return sum(
            1
            for paths in self._domains.values()
            for records in paths.values()
            for record in records.values()
            if record.expires is None or record.expires >= now
        )

    def __repr__(self) -> str:
        return f"CookieJar(domains={list(self._domains)!r})"
