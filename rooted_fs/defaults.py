"""The process-wide default root.

Every :class:`~rooted_fs.base.RootedBase` nests its own root under the default
root.  Until it is set the default root is ``/``; it can be set exactly once.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from .paths import SEP, normalize_path

logger = logging.getLogger(__name__)


class DefaultRoot:
    """Write-once holder for the default root directory."""

    def __init__(self) -> None:
        self._root: Optional[str] = None

    @property
    def value(self) -> str:
        return SEP if self._root is None else self._root

    @property
    def is_set(self) -> bool:
        return self._root is not None

    def set(self, root_dir: str) -> bool:
        """Set the default root for all subsequently created instances.

        Relative paths are taken relative to the process working directory.
        Returns ``False`` (and keeps the current value) if the root was already
        set or *root_dir* is not an existing directory.
        """
        if self._root is not None:
            logger.warning("The default root is already set to %r", self._root)
            return False

        root = normalize_path(root_dir, os.getcwd())
        if root is None or not os.path.isdir(root):
            logger.warning("Can't use %r as the default root - not a directory", root_dir)
            return False

        self._root = root
        logger.debug("Default root set to %r", root)
        return True

    def reset(self) -> None:
        """Forget the configured value.  Meant for test isolation."""
        self._root = None


DEFAULT_ROOT = DefaultRoot()


def set_default_root(root_dir: str) -> bool:
    return DEFAULT_ROOT.set(root_dir)


def get_default_root() -> str:
    return DEFAULT_ROOT.value


def reset_default_root() -> None:
    DEFAULT_ROOT.reset()
