"""cookielite: lightweight cookie string codec and in-memory cookie jar.

Basic usage::

    from cookielite import CookieJar, parse, serialize

    parse("session=abc123; theme=dark")  # {"session": "abc123", "theme": "dark"}
    serialize({"copyright": "©"})        # "copyright=%C2%A9"

    jar = CookieJar()
    jar.set_cookie("session=abc123", "example.com")
    jar.get_cookies("example.com", "/api")
"""

__version__ = "0.1.0"
__all__ = [
    "CookieError",
    "CookieJar",
    "CookieRecord",
    "InvalidCookieNameError",
    "JarConfig",
    "MalformedCookieError",
    "StoredCookie",
    "parse",
    "serialize",
]

# name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "CookieError": "cookielite.errors",
    "CookieJar": "cookielite.jar",
    "CookieRecord": "cookielite.jar",
    "InvalidCookieNameError": "cookielite.errors",
    "JarConfig": "cookielite.config",
    "MalformedCookieError": "cookielite.errors",
    "StoredCookie": "cookielite.jar",
    "parse": "cookielite.codec",
    "serialize": "cookielite.codec",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import cookielite`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
