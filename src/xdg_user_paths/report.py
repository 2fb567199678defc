"""Snapshot of all four base directories and its text / JSON renderings."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from .paths import (
    CACHE_HOME_VAR,
    CONFIG_HOME_VAR,
    DATA_HOME_VAR,
    RUNTIME_DIR_VAR,
    Segment,
    xdg_cache_home,
    xdg_config_home,
    xdg_data_home,
    xdg_runtime_dir,
)


@dataclass(frozen=True)
class BaseDirs:
    """Resolved base directories at one point in time.

    Attributes:
        config_home: Result of ``xdg_config_home``.
        cache_home: Result of ``xdg_cache_home``.
        data_home: Result of ``xdg_data_home``.
        runtime_dir: Result of ``xdg_runtime_dir``.
    """
    config_home: Path
    cache_home: Path
    data_home: Path
    runtime_dir: Path

    def to_dict(self) -> Dict[str, str]:
        """Serialize to a plain dict of strings for JSON encoding."""
        return {
            "config_home": str(self.config_home),
            "cache_home": str(self.cache_home),
            "data_home": str(self.data_home),
            "runtime_dir": str(self.runtime_dir),
        }


def resolve_all(*segments: Segment, env: Optional[Mapping[str, str]] = None) -> BaseDirs:
    """Resolve every base directory with the same *segments* appended.

    The first resolver that fails raises; no partial result is returned.
    """
    return BaseDirs(
        config_home=xdg_config_home(*segments, env=env),
        cache_home=xdg_cache_home(*segments, env=env),
        data_home=xdg_data_home(*segments, env=env),
        runtime_dir=xdg_runtime_dir(*segments, env=env),
    )


def format_text(dirs: BaseDirs) -> str:
    """Render *dirs* as shell-style ``XDG_*=path`` lines."""
    lines = [
        f"{CONFIG_HOME_VAR}={dirs.config_home}",
        f"{CACHE_HOME_VAR}={dirs.cache_home}",
        f"{DATA_HOME_VAR}={dirs.data_home}",
        f"{RUNTIME_DIR_VAR}={dirs.runtime_dir}",
    ]
    return "\n".join(lines)


def report_to_json(dirs: BaseDirs) -> str:
    """Serialize *dirs* to an indented JSON string."""
    return json.dumps(dirs.to_dict(), indent=2)
