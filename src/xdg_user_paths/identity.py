"""Home-directory and user-identity lookups used by the resolvers.

Both are looked up by name at call time, so tests can swap them out with
``unittest.mock.patch("xdg_user_paths.identity.home_dir", ...)``.
"""

from __future__ import annotations

import os
from pathlib import Path

from .errors import HomeDirectoryUnresolved, UserIdentityUnavailable


def home_dir() -> Path:
    """Return the current user's home directory as an absolute path.

    Uses ``$HOME`` first and the password database second (the same order
    as ``os.path.expanduser``).

    Raises:
        HomeDirectoryUnresolved: If $HOME is set but empty, or neither source
            yields an absolute path.
    """
    if os.environ.get("HOME") == "":
        # expanduser() maps an empty $HOME to "/"
        raise HomeDirectoryUnresolved("Could not determine home directory ($HOME is empty)")
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise HomeDirectoryUnresolved(f"Could not determine home directory: {e}") from e
    # Older Pythons return "~" unchanged instead of raising
    if not home.is_absolute():
        raise HomeDirectoryUnresolved(f"Could not determine home directory (got {str(home)!r})")
    return home


def user_id() -> int:
    """Return the numeric user id of the running process.

    Raises:
        UserIdentityUnavailable: If the platform has no ``getuid``.
    """
    getuid = getattr(os, "getuid", None)
    if getuid is None:
        raise UserIdentityUnavailable("Numeric user id is not available on this platform")
    return getuid()
