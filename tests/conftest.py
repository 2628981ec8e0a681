"""Shared fixtures for rooted_fs tests."""

import logging
from pathlib import Path

import pytest

from rooted_fs.defaults import reset_default_root
from rooted_fs.fs import FileSystem


@pytest.fixture(autouse=True)
def clean_default_root():
    """Every test starts with the process-wide default root unset."""
    reset_default_root()
    yield
    reset_default_root()


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Ensure logs propagate to root so caplog can catch them, even after the CLI configured logging."""
    logger = logging.getLogger("rooted_fs")
    old_propagate = logger.propagate
    old_level = logger.level
    old_handlers = list(logger.handlers)
    logger.propagate = True
    yield
    for handler in logger.handlers:
        if handler not in old_handlers:
            handler.close()
    logger.handlers[:] = old_handlers
    logger.propagate = old_propagate
    logger.setLevel(old_level)


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Build a small tree to confine tests to.

    site/
        index.html
        docs/
            a.txt
            b.md
            nested/
                c.txt
        empty/
    """
    root = tmp_path / "site"
    (root / "docs" / "nested").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "index.html").write_text("<h1>home</h1>")
    (root / "docs" / "a.txt").write_text("alpha")
    (root / "docs" / "b.md").write_text("# beta")
    (root / "docs" / "nested" / "c.txt").write_text("gamma")
    return root


@pytest.fixture
def fs(site: Path) -> FileSystem:
    return FileSystem(str(site))

