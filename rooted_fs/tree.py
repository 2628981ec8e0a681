"""Recursive copy, remove and glob over raw filesystem paths.

These helpers are NOT confined to a root and do not know about the current
directory of any instance; :class:`~rooted_fs.fs.FileSystem` resolves paths
before handing them over.  None of them roll back: a ``False`` result means at
least one entry failed, and whatever was done before that stays done.
"""
from __future__ import annotations

import glob
import logging
import os
import shutil
from typing import List

from .paths import SEP

logger = logging.getLogger(__name__)


def _is_real_dir(path: str) -> bool:
    # Symlinked directories are treated as plain entries and never walked.
    return os.path.isdir(path) and not os.path.islink(path)


def copy_tree(src: str, dst: str, overwrite: bool = False) -> bool:
    """Copy a file or directory.  Directories are copied recursively.

    Parameters
    ----------
    src : str
        The source file or directory.
    dst : str
        The destination path.  If it ends with the separator, the basename of
        *src* is appended.
    overwrite : bool
        Overwrite an existing destination.

    Returns
    -------
    bool
        ``True`` only if every entry was copied.
    """
    src = os.path.abspath(src)
    if dst.endswith(SEP):
        dst += os.path.basename(src)

    if not overwrite and os.path.lexists(dst):
        logger.warning("Destination path %r already exists, pass overwrite=True to force", dst)
        return False

    if not _is_real_dir(src):
        try:
            shutil.copyfile(src, dst, follow_symlinks=False)
        except OSError as e:
            logger.warning("Can't copy %r to %r: %s", src, dst, e)
            return False

        return True

    dst_abs = os.path.abspath(dst)
    if dst_abs == src or dst_abs.startswith(src.rstrip(SEP) + SEP):
        logger.warning("Can't copy %r into itself (%r)", src, dst)
        return False

    # Listed before dst exists, so a dst reached through a symlink into src
    # doesn't show up among the entries.
    try:
        entries = os.listdir(src)
    except OSError as e:
        logger.warning("Can't read directory %r: %s", src, e)
        return False

    if not (overwrite and _is_real_dir(dst)):
        try:
            os.mkdir(dst)
        except OSError as e:
            logger.warning("Can't mkdir %r: %s", dst, e)
            return False

    result = True
    for entry in entries:
        result = copy_tree(os.path.join(src, entry), os.path.join(dst, entry), overwrite) and result

    return result


def remove_tree(path: str) -> bool:
    """Delete a file or directory.  Directories are deleted recursively.

    Every entry is attempted even after a failure.  A directory is only removed
    once all of its entries are gone.
    """
    if not _is_real_dir(path):
        try:
            os.unlink(path)
        except OSError as e:
            logger.warning("Can't remove %r: %s", path, e)
            return False

        return True

    try:
        entries = os.listdir(path)
    except OSError as e:
        logger.warning("Can't read directory %r: %s", path, e)
        return False

    result = True
    for entry in entries:
        result = remove_tree(os.path.join(path, entry)) and result

    if not result:
        logger.warning("Leaving %r in place, some of its entries could not be removed", path)
        return False

    try:
        os.rmdir(path)
    except OSError as e:
        logger.warning("Can't remove directory %r: %s", path, e)
        return False

    return True


def glob_tree(pattern: str = "*", directory: str = ".") -> List[str]:
    """Recursively list the entries matching a glob pattern.

    The matches directly inside *directory* come first, followed by the
    matches of each subdirectory in the order the filesystem lists them.
    """
    base = glob.escape(directory)
    entries = glob.glob(os.path.join(base, pattern))
    for sub_dir in glob.glob(os.path.join(base, "*")):
        if _is_real_dir(sub_dir):
            entries.extend(glob_tree(pattern, os.path.join(directory, os.path.basename(sub_dir))))

    return entries
