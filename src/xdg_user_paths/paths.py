"""XDG base directory resolution.

Each resolver checks its ``XDG_*`` variable first and falls back to the
usual location under the user's home directory (or ``/run/user/<uid>`` for
the runtime directory).  Nothing is cached and nothing touches the
filesystem: every call re-reads the environment and only builds a path.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from . import identity

Segment = Union[str, "os.PathLike[str]"]

CONFIG_HOME_VAR = "XDG_CONFIG_HOME"
CACHE_HOME_VAR = "XDG_CACHE_HOME"
DATA_HOME_VAR = "XDG_DATA_HOME"
RUNTIME_DIR_VAR = "XDG_RUNTIME_DIR"

RUNTIME_ROOT = Path("/run/user")


def _override(var: str, env: Optional[Mapping[str, str]]) -> Optional[Path]:
    """Return the value of *var* as a path, or None if it is unusable.

    Empty and relative values are treated as unset.
    """
    value = (os.environ if env is None else env).get(var)
    if not value:
        return None
    path = Path(value)
    if not path.is_absolute():
        return None
    return path


def _join(base: Path, segments: Iterable[Segment]) -> Path:
    """Append *segments* to *base* in order."""
    return base.joinpath(*segments)


def _home_based(var: str, suffix: str, segments: Iterable[Segment], env: Optional[Mapping[str, str]]) -> Path:
    base = _override(var, env)
    if base is None:
        base = identity.home_dir() / suffix
    return _join(base, segments)


def xdg_config_home(*segments: Segment, env: Optional[Mapping[str, str]] = None) -> Path:
    """Return ``$XDG_CONFIG_HOME`` (default ``~/.config``) joined with *segments*.

    An empty or relative override is ignored and the default is used instead,
    so the result is always absolute.  The same applies to the other three
    resolvers.

    Args:
        *segments: Path components appended in the order given.
        env: Mapping read instead of ``os.environ``.

    Raises:
        HomeDirectoryUnresolved: If the override is absent and the home
            directory cannot be determined.
    """
    return _home_based(CONFIG_HOME_VAR, ".config", segments, env)


def xdg_cache_home(*segments: Segment, env: Optional[Mapping[str, str]] = None) -> Path:
    """Return ``$XDG_CACHE_HOME`` (default ``~/.cache``) joined with *segments*."""
    return _home_based(CACHE_HOME_VAR, ".cache", segments, env)


def xdg_data_home(*segments: Segment, env: Optional[Mapping[str, str]] = None) -> Path:
    """Return ``$XDG_DATA_HOME`` (default ``~/.local/share``) joined with *segments*."""
    return _home_based(DATA_HOME_VAR, ".local/share", segments, env)


def xdg_runtime_dir(*segments: Segment, env: Optional[Mapping[str, str]] = None) -> Path:
    """Return ``$XDG_RUNTIME_DIR`` (default ``/run/user/<uid>``) joined with *segments*.

    The default is built from the numeric user id alone; the home directory
    is never looked up.  When the override is set the uid is not queried.

    Raises:
        UserIdentityUnavailable: If the override is absent and the platform
            has no ``getuid``.
    """
    base = _override(RUNTIME_DIR_VAR, env)
    if base is None:
        base = RUNTIME_ROOT / str(identity.user_id())
    return _join(base, segments)
