# -*- coding: utf-8 -*-
"""
Configuration helpers for rooted_fs.

The configuration is a TOML file with an optional top-level ``default_root``
and a ``profile`` table holding one entry per named view::

    default_root = "$HOME/sites"

    [profile.default]
    root = "/blog"
    cwd = "/posts"
    umask = 0o027
"""

import logging
import os
from typing import Optional, Dict, List, Any, Mapping
import tomllib

from .profile import Profile

logger = logging.getLogger(__name__)


def expand_str(val: str) -> str:
    """Expand $VAR, ${VAR} and %VAR% in a single string."""
    return os.path.expandvars(val)

def expand_env(obj: Any) -> Any:
    """Recursively walk a TOML‑decoded object and expand strings."""
    if isinstance(obj, Mapping):
        return {k: expand_env(v) for k, v in obj.items()}

    if isinstance(obj, list):
        return [expand_env(v) for v in obj]

    if isinstance(obj, str):
        return expand_str(obj)

    return obj  # numbers, bools, None

def load_toml_file(
    file_path: str
) -> Dict[str, Any]:
    """
    Load and parse a TOML file into a dictionary.

    Args:
        file_path: Path to the TOML file

    Returns:
        Dictionary of parsed TOML data or empty dict if error
    """
    path = os.path.expanduser(file_path)
    if not os.path.exists(path):
        logger.info("Config file not found: %s", path)
        return {}

    try:
        with open(path, "rb") as f:
            return expand_env(tomllib.load(f))

    except tomllib.TOMLDecodeError as e:
        logger.error("Invalid TOML format in %s: %s", path, e)
        return {}

def read_default_root(config_path: str) -> Optional[str]:
    """Return the top-level ``default_root`` setting, if present."""
    value = load_toml_file(config_path).get("default_root")
    if value is not None and not isinstance(value, str):
        raise ValueError("'default_root' must be a string in the TOML file")

    return value

def read_profiles(config_path: str) -> List[Profile]:
    """Load *all* profiles from a TOML configuration file.

    Parameters
    ----------
    config_path: str
        Path to the TOML configuration file.

    Returns
    -------
    List[Profile]
        One :class:`Profile` object per profile defined in the file.
    """
    data = load_toml_file(config_path)
    profiles_section = data.get("profile", {})
    if not isinstance(profiles_section, Mapping):
        raise ValueError("'profile' section must be a mapping in the TOML file")

    known_keys = {"root", "cwd", "umask"}
    result: List[Profile] = []
    for name, raw in profiles_section.items():
        if not isinstance(raw, Mapping):
            raise ValueError(f"Profile '{name}' must be a mapping in the TOML file")

        for key in ("root", "cwd"):
            if not isinstance(raw.get(key, "/"), str):
                raise ValueError(f"Profile '{name}': '{key}' must be a string")

        umask = raw.get("umask", 0o022)
        if not isinstance(umask, int) or isinstance(umask, bool):
            raise ValueError(f"Profile '{name}': 'umask' must be an integer, e.g. 0o022")

        extra: Dict[str, Any] = {k: v for k, v in raw.items() if k not in known_keys}
        result.append(
            Profile(
                name=name,
                root=raw.get("root", "/"),
                cwd=raw.get("cwd", "/"),
                umask=umask,
                extra=extra,
            )
        )

    return result

def get_profile(config_path: str, name: str = "default") -> Profile:
    """Return a single :class:`Profile` by name.

    This is a convenience wrapper used by the CLI.  It raises ``KeyError`` if the
    requested profile does not exist.
    """
    for p in read_profiles(config_path):
        if p.name == name:
            return p

    raise KeyError(f"Profile '{name}' not found in {config_path}")
