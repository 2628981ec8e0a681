# -*- coding: utf-8 -*-
"""
Data model for a configuration *profile*.

The configuration file (a TOML file) contains a top‑level ``profile`` section
where each entry names a confined view: its root, starting directory and the
umask used for new directories.  Loading is handled by ``rooted_fs.config``;
this module does no I/O so profiles are easy to build in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Profile:
    """Immutable representation of a single configuration profile.

    Attributes
    ----------
    name: str
        The identifier used in the TOML file (e.g. ``default``).
    root: str
        Root directory of the view, nested under the default root.
    cwd: str
        Directory to change into after opening, relative to ``root``.
    umask: int
        Mask applied to ``0o777`` for directories created through the view.
    extra: Dict[str, Any]
        Catch‑all for any additional keys present in the TOML profile.
    """

    name: str
    root: str = "/"
    cwd: str = "/"
    umask: int = 0o022
    extra: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        """Convert the dataclass back to a plain ``dict``."""
        base = {
            "root": self.root,
            "cwd": self.cwd,
            "umask": self.umask,
        }
        return {**base, **self.extra}
