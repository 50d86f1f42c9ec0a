"""Cookie string parsing and serialization.

``parse`` turns ``name=value; flag; other=value`` strings into a dict and
``serialize`` does the reverse. Names and values go through URI-component
percent-encoding in both directions.

The pattern is compiled once at import and only ever iterated with
``finditer``, so every call keeps its own scan position.
"""

import re
from collections.abc import Mapping
from urllib.parse import quote, unquote

from cookielite._internal.types import CookieMapping

# name: no '=', ';' or space. value: anything but ';' (spaces allowed for
# legacy cookies such as ``hello= ``).
_PAIR_RE = re.compile(r"([^=; ]+)=?([^;]+)?;?")

# Characters encodeURIComponent leaves alone on top of quote()'s own
# always-safe set (letters, digits, ``_.-~``).
_URI_COMPONENT_SAFE = "!*'()"


def parse(cookie_string: str) -> CookieMapping:
    """Parse a cookie string into a name-value dict.

    Valueless tokens (``noValue``) map to ``None``. A repeated name keeps
    its last value. Returns an empty dict when nothing matches; never
    raises for string input.
    """
    pairs: CookieMapping = {}
    for match in _PAIR_RE.finditer(cookie_string):
        name, value = match.group(1), match.group(2)
        pairs[unquote(name)] = None if value is None else unquote(value)
    return pairs


def serialize(data: Mapping[str, str | None]) -> str:
    """Serialize a name-value mapping to a ``;``-joined cookie string.

    ``None`` values emit the bare name. Iteration order is preserved.
    Strings holding lone surrogates cannot be UTF-8 encoded and raise
    ``UnicodeEncodeError``.
    """
    fragments: list[str] = []
    for name, value in data.items():
        encoded = _encode_component(name)
        if value is None:
            fragments.append(encoded)
        else:
            fragments.append(f"{encoded}={_encode_component(value)}")
    return ";".join(fragments)


def _encode_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)
