"""Common utilities for objects operating under a fixed filesystem root."""

from __future__ import annotations

import logging
import os
from typing import Optional

from .defaults import DEFAULT_ROOT, DefaultRoot
from .paths import SEP, LocalPath, SystemPath, normalize_path

logger = logging.getLogger(__name__)


class RootedBase:
    """Base class that stores a *root* directory and maps paths in and out of it.

    Paths handed to an instance ("local" paths) are interpreted relative to the
    root: ``/`` is the root itself and relative paths are resolved against the
    instance's current directory.  Sub‑classes (e.g. :class:`FileSystem`) rely
    on :meth:`to_system_path` instead of touching caller paths directly.
    """

    def __init__(self, root: str = SEP, default_root: Optional[DefaultRoot] = None) -> None:
        """Initialize the object with a directory that will serve as the root.

        Parameters
        ----------
        root : str
            Directory nested under the default root.  All paths used by the
            instance are resolved against it and must stay inside it.
        default_root : Optional[DefaultRoot]
            The default root holder to nest under.  Defaults to the
            process-wide one.
        """
        if default_root is None:
            default_root = DEFAULT_ROOT

        # Normalized on its own first so ``..`` can't climb out of the default root.
        local = normalize_path(root.rstrip(SEP))
        if local is None:
            raise NotADirectoryError(f"'{root}' is outside the default root")

        resolved = (default_root.value.rstrip(SEP) + local).rstrip(SEP) or SEP
        if not os.path.isdir(resolved):
            raise NotADirectoryError(f"'{root}' is not a valid directory")

        self._root = resolved
        self._cwd = LocalPath(SEP)
        self._umask = 0o022

    @property
    def root(self) -> str:
        return self._root

    @property
    def cwd(self) -> LocalPath:
        """The current directory, relative to the root."""
        return self._cwd

    def pwd(self) -> LocalPath:
        return self._cwd

    @property
    def umask(self) -> int:
        """Mask applied to ``0o777`` when creating directories."""
        return self._umask

    @umask.setter
    def umask(self, value: int) -> None:
        self._umask = value

    def resolve_local(self, path: str) -> Optional[LocalPath]:
        """Normalize *path* relative to the current directory.

        The path doesn't need to exist.  Returns ``None`` if it would escape
        the root.
        """
        resolved = normalize_path(path, self._cwd)
        if resolved is None:
            return None

        return LocalPath(resolved)

    def to_system_path(self, path: str) -> Optional[SystemPath]:
        """Map a local path to the underlying filesystem.

        Returns ``None`` if the path can't be normalized.
        """
        local = self.resolve_local(path)
        if local is None:
            return None

        return SystemPath((self._root.rstrip(SEP) + local).rstrip(SEP) or SEP)

    def to_local_path(self, sys_path: str) -> Optional[LocalPath]:
        """Map a filesystem path to one inside the root - opposite of :meth:`to_system_path`.

        Relative *sys_path* values are taken relative to the process working
        directory, not the instance's current directory.

        Returns
        -------
        Optional[LocalPath]
            The path relative to the root, or ``None`` if *sys_path* is not
            inside the root.
        """
        fs_path = normalize_path(sys_path, os.getcwd())
        if fs_path is None:
            return None

        if fs_path == self._root:
            return LocalPath(SEP)

        # Compare whole segments so a sibling like ``/srv/site2`` is not
        # mistaken for part of ``/srv/site``.
        prefix = self._root.rstrip(SEP) + SEP
        if not fs_path.startswith(prefix):
            logger.debug("%r is not under the root %r", fs_path, self._root)
            return None

        return LocalPath(SEP + fs_path[len(prefix):])

    def __call__(self, path: str) -> Optional[SystemPath]:
        return self.to_system_path(path)

    def __str__(self) -> str:
        """The system path corresponding to the current directory."""
        return (self._root.rstrip(SEP) + self._cwd).rstrip(SEP) or SEP

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self._root!r}, cwd={self._cwd!r})"

    def is_file(self, path: str) -> bool:
        fs_path = self.to_system_path(path)
        return fs_path is not None and os.path.isfile(fs_path)

    def is_dir(self, path: str) -> bool:
        fs_path = self.to_system_path(path)
        return fs_path is not None and os.path.isdir(fs_path)

    def change_directory(self, path: str) -> bool:
        """Change the current directory.

        The current directory is left alone unless *path* resolves inside the
        root and names an existing directory.
        """
        local = self.resolve_local(path)
        if local is None or not self.is_dir(local):
            logger.warning("Can't cd to %r - not a directory", path)
            return False

        self._cwd = local
        return True
