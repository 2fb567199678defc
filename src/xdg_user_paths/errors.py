"""Exceptions raised when a base directory cannot be resolved."""

from __future__ import annotations


class XdgPathError(RuntimeError):
    """Base class for every resolution failure in this package."""


class HomeDirectoryUnresolved(XdgPathError):
    """The home directory could not be determined and no override was usable."""


class UserIdentityUnavailable(XdgPathError):
    """The platform offers no way to query the numeric user id."""
