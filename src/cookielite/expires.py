"""``Expires`` attribute extraction.

Only the expiry is read out of a raw cookie string; every other attribute
is left to the caller.
"""

import logging
import re
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

logger = logging.getLogger("cookielite.expires")

_EXPIRES_RE = re.compile(r"Expires=([^;]+)", re.IGNORECASE)


def find_expires(cookie_string: str) -> int | None:
    """Return the ``Expires`` attribute of *cookie_string* as a timestamp.

    The attribute may appear anywhere in the string. Returns ``None`` when
    it is absent or unparseable.
    """
    match = _EXPIRES_RE.search(cookie_string)
    if match is None:
        return None
    raw = match.group(1).strip()
    expires = parse_http_date(raw)
    if expires is None:
        logger.debug("Ignoring unparseable Expires value %r", raw)
    return expires


def parse_http_date(text: str) -> int | None:
    """Parse an HTTP or ISO 8601 date into POSIX seconds.

    Accepts RFC 1123 (``Sun, 06 Nov 1994 08:49:37 GMT``), RFC 850 and
    asctime forms, then falls back to ISO 8601. Naive values are taken as
    UTC. Returns ``None`` instead of raising.
    """
    parsed = _parse_datetime(text)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    try:
        return int(parsed.timestamp())
    except (OverflowError, OSError, ValueError):
        return None


def _parse_datetime(text: str) -> datetime | None:
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError, OverflowError):
        pass
    try:
        return datetime.fromisoformat(text)
    except (ValueError, OverflowError):
        return None
