"""Jar configuration.

JarConfig is a frozen dataclass: immutable after creation, no string-key
dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class JarConfig:
    """Cookie jar configuration. Immutable after creation.

    Override what you need::

        config = JarConfig(evict_on_read=False)
    """

    # Path used when set_cookie / get_cookies are called without one
    default_path: str = "/"

    # Cookies stored under this path are visible from every path of the domain
    root_path: str = "/"

    # Physically delete expired records met during reads (False = filter only)
    evict_on_read: bool = True
