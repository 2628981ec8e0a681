"""FileSystem implementation that inherits from RootedBase.
"""
from __future__ import annotations

import glob
import logging
import os
from typing import Iterable, List, Optional, Tuple

from .base import RootedBase
from .paths import SEP, LocalPath, SystemPath
from .tree import copy_tree, glob_tree, remove_tree

logger = logging.getLogger(__name__)


class FileSystem(RootedBase):
    """File management confined to a designated root directory.

    Every method takes local paths (see :class:`RootedBase`) and reports
    failure by returning ``False`` or an empty list; the reason is logged.
    """

    def _to_local_paths(self, sys_paths: Iterable[str]) -> List[LocalPath]:
        local_paths = (self.to_local_path(p) for p in sys_paths)
        return [p for p in local_paths if p is not None]

    def list_files(self, pattern: str = "*") -> List[LocalPath]:
        """List the entries matching a glob pattern.

        A pattern ending with the separator lists everything in that directory.

        Parameters:
            pattern: str - Glob pattern, relative to the root or the current directory.
        """
        if pattern.endswith(SEP):
            pattern += "*"

        local = self.resolve_local(pattern)
        if local is None:
            return []

        # Only the pattern part may contain wildcards, the root is taken literally.
        fs_glob = glob.escape(self.root.rstrip(SEP)) + local
        return self._to_local_paths(glob.glob(fs_glob))

    def find_files(self, pattern: str = "*", directory: str = ".") -> List[LocalPath]:
        """Recursively list the entries matching a glob pattern.

        Parameters:
            pattern: str - Glob pattern matched against entry names at every level.
            directory: str - Directory to start from.
        """
        fs_dir = self.to_system_path(directory)
        if fs_dir is None:
            return []

        return self._to_local_paths(glob_tree(pattern, fs_dir))

    def _transfer_paths(
        self, src: str, dst: str, overwrite: bool
    ) -> Optional[Tuple[SystemPath, SystemPath]]:
        """Resolve both ends of a copy or move, honouring ``dst/`` and *overwrite*."""
        fs_src = self.to_system_path(src)
        fs_dst = self.to_system_path(dst)
        if fs_src is None or fs_dst is None:
            logger.warning("Can't transfer %r to %r - path outside the root", src, dst)
            return None

        if dst.endswith(SEP):
            fs_dst = SystemPath(os.path.join(fs_dst, os.path.basename(fs_src)))

        if os.path.lexists(fs_dst) and not overwrite:
            logger.warning("Destination path %r already exists, pass overwrite=True to force", fs_dst)
            return None

        return fs_src, fs_dst

    def copy(self, src: str, dst: str, overwrite: bool = False) -> bool:
        """Copy a file or directory.  Directories are copied recursively.

        Parameters:
            src: str - The source file or directory.
            dst: str - The destination.  Ending it with ``/`` copies into that directory.
            overwrite: bool - Overwrite an existing destination.
        """
        paths = self._transfer_paths(src, dst, overwrite)
        if paths is None:
            return False

        return copy_tree(*paths, overwrite=overwrite)

    def move(self, src: str, dst: str, overwrite: bool = False) -> bool:
        """Move a file or directory with a single rename.

        There is no fallback to copy and delete, so moving across devices fails.
        """
        paths = self._transfer_paths(src, dst, overwrite)
        if paths is None:
            return False

        fs_src, fs_dst = paths
        try:
            os.replace(fs_src, fs_dst)
        except OSError as e:
            logger.warning("Can't move %r to %r: %s", fs_src, fs_dst, e)
            return False

        logger.debug("Moved %r to %r", fs_src, fs_dst)
        return True

    def remove(self, path: str, recursive: bool = False) -> bool:
        """Delete a file.  With *recursive*, delete any entry like ``rm -rf``."""
        fs_path = self.to_system_path(path)
        if fs_path is None:
            return False

        if recursive:
            return remove_tree(fs_path)

        if not os.path.isfile(fs_path):
            logger.warning("Not a file: %r", fs_path)
            return False

        try:
            os.unlink(fs_path)
        except OSError as e:
            logger.warning("Can't remove %r: %s", fs_path, e)
            return False

        return True

    def create_directory(self, path: str, recursive: bool = False) -> bool:
        """Create a directory within the root.

        Parameters:
            path: str - The directory path.
            recursive: bool - Also create missing parent directories, like ``mkdir -p``.
        """
        fs_path = self.to_system_path(path)
        if fs_path is None:
            return False

        mode = 0o777 & ~self.umask
        missing = [fs_path]
        if recursive:
            parent = os.path.dirname(fs_path)
            while parent != missing[-1] and not os.path.lexists(parent):
                missing.append(parent)
                parent = os.path.dirname(parent)

        # Top down, every created level gets the same mode.
        for dir_path in reversed(missing):
            try:
                os.mkdir(dir_path, mode)
            except OSError as e:
                logger.warning("Can't mkdir %r: %s", dir_path, e)
                return False

            logger.debug("Created directory %r with mode %#o", dir_path, mode)

        return True

    def remove_directory(self, path: str, recursive: bool = False) -> bool:
        """Remove a directory.  Non-empty directories need *recursive*."""
        fs_path = self.to_system_path(path)
        if fs_path is None or not os.path.isdir(fs_path):
            logger.warning("Not a directory: %r", fs_path or path)
            return False

        if recursive:
            return remove_tree(fs_path)

        try:
            os.rmdir(fs_path)
        except OSError as e:
            logger.warning("Can't remove directory %r: %s", fs_path, e)
            return False

        return True
