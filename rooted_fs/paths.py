"""Lexical path normalization shared by every rooted filesystem object.

Nothing in here touches the disk: a path is split on the separator, ``.`` and
empty segments are dropped, and ``..`` pops the previous segment.  Popping past
the first segment is how confinement is enforced, so callers get ``None`` back
instead of a path that would leave the root.
"""
from __future__ import annotations

import logging
from typing import List, NewType, Optional

logger = logging.getLogger(__name__)

SEP = "/"

# A path inside the confined namespace, always starting with ``SEP``.
LocalPath = NewType("LocalPath", str)

# A real filesystem path obtained by joining the root with a ``LocalPath``.
SystemPath = NewType("SystemPath", str)


def normalize_path(path: str, rel_to: str = SEP) -> Optional[str]:
    """Resolve ``//``, ``.`` and ``..`` in *path*.

    Parameters
    ----------
    path : str
        The path to normalize.  If it does not start with the separator it is
        taken as relative to *rel_to*.
    rel_to : str
        The directory used for relative paths.

    Returns
    -------
    Optional[str]
        The normalized path, or ``None`` if a ``..`` would climb above the
        first segment.
    """
    if not path.startswith(SEP):
        path = f"{rel_to}{SEP}{path}"

    lead = SEP if path.startswith(SEP) else ""
    segments: List[str] = []
    for segment in path.split(SEP):
        if segment in ("", "."):
            continue

        if segment == "..":
            if not segments:
                logger.warning("Trying to climb out of the root dir: %r", path)
                return None

            segments.pop()
            continue

        segments.append(segment)

    return lead + SEP.join(segments)
