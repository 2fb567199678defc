"""Resolve XDG base directories (config, cache, data, runtime) for the current user.

The directories are only computed, never created::

    >>> from xdg_user_paths import xdg_data_home
    >>> xdg_data_home("my-app")  # doctest: +SKIP
    PosixPath('/home/alice/.local/share/my-app')
"""

from .errors import HomeDirectoryUnresolved, UserIdentityUnavailable, XdgPathError
from .paths import xdg_cache_home, xdg_config_home, xdg_data_home, xdg_runtime_dir
from .report import BaseDirs, resolve_all

__all__ = [
    "BaseDirs",
    "HomeDirectoryUnresolved",
    "UserIdentityUnavailable",
    "XdgPathError",
    "resolve_all",
    "xdg_cache_home",
    "xdg_config_home",
    "xdg_data_home",
    "xdg_runtime_dir",
]
