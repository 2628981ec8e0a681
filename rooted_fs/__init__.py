"""
rooted-fs package.
"""

# Load the package version from the VERSION file at the repository root.
import pathlib

from .base import RootedBase
from .defaults import DefaultRoot, get_default_root, reset_default_root, set_default_root
from .fs import FileSystem
from .paths import SEP, LocalPath, SystemPath, normalize_path
from .tree import copy_tree, glob_tree, remove_tree

_VERSION_FILE = pathlib.Path(__file__).resolve().parent.parent / "VERSION"
try:
    __version__ = _VERSION_FILE.read_text().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "SEP",
    "LocalPath",
    "SystemPath",
    "normalize_path",
    "DefaultRoot",
    "set_default_root",
    "get_default_root",
    "reset_default_root",
    "RootedBase",
    "FileSystem",
    "copy_tree",
    "remove_tree",
    "glob_tree",
]
