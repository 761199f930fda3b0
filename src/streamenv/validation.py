"""Environment variable name checks."""

from __future__ import annotations

import re

from streamenv.errors import InvalidKey

# POSIX portable names: underscores, digits and alphabetics from the portable
# character set, not starting with a digit.
POSIX_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_posix_name(key: str) -> bool:
    return POSIX_NAME.fullmatch(key) is not None


def validate_key(key: str, *, strict: bool) -> None:
    """Raise :class:`InvalidKey` when ``strict`` and ``key`` is not POSIX safe.

    An empty key is accepted; the loader skips it without publishing.
    Permissive mode accepts anything, including a leading digit.
    """
    if not strict or not key:
        return
    if not is_posix_name(key):
        raise InvalidKey(key)
