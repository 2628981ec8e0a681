"""Tests for CLI output formatting."""

import io

import pytest

from rooted_fs.formatter import RawTextFormatter, get_formatter
from rooted_fs.fs import FileSystem


def test_raw_text_writes_to_given_stream(fs: FileSystem) -> None:
    out = io.StringIO()
    formatter = get_formatter(False, out)
    assert isinstance(formatter, RawTextFormatter)

    formatter.print_paths(["/docs", "/index.html"], fs)
    formatter.print_message("/docs/nested")
    assert out.getvalue() == "/docs/\n/index.html\n/docs/nested\n"


def test_rich_writes_to_given_stream(fs: FileSystem) -> None:
    pytest.importorskip("rich")
    out = io.StringIO()
    get_formatter(True, out).print_paths(["/docs", "/index.html"], fs)
    assert out.getvalue().splitlines() == ["/docs", "/index.html"]
