"""Tests for the rfs command line."""

from pathlib import Path
from typing import List

import pytest

from rooted_fs.cli import main, parse_arguments


@pytest.fixture
def run(site: Path, tmp_path: Path):
    """Run the CLI against the test site with no configuration file."""
    conf_file = tmp_path / "missing.toml"

    def _run(*argv: str, root: str = str(site)) -> int:
        args: List[str] = ["--conf-file", str(conf_file)]
        if root is not None:
            args += ["--root", root]
        return main(parse_arguments(args + list(argv)))

    return _run


def test_pwd(run, capsys: pytest.CaptureFixture) -> None:
    assert run("--cwd", "docs/nested", "pwd") == 0
    assert capsys.readouterr().out == "/docs/nested\n"


def test_bad_cwd_fails(run, capsys: pytest.CaptureFixture) -> None:
    assert run("--cwd", "/missing", "pwd") == 1
    assert "Can't change to" in capsys.readouterr().err


def test_resolve(run, site: Path, capsys: pytest.CaptureFixture) -> None:
    assert run("resolve", "/docs/../index.html") == 0
    assert capsys.readouterr().out == f"{site}/index.html\n"
    assert run("resolve", "/../etc/passwd") == 1


def test_ls_marks_directories(run, capsys: pytest.CaptureFixture) -> None:
    assert run("ls", "/docs/") == 0
    lines = sorted(capsys.readouterr().out.splitlines())
    assert lines == ["/docs/a.txt", "/docs/b.md", "/docs/nested/"]


def test_ls_without_matches_fails(run) -> None:
    assert run("ls", "/*.pdf") == 1


def test_find(run, capsys: pytest.CaptureFixture) -> None:
    assert run("find", "*.txt", "-d", "/docs") == 0
    assert sorted(capsys.readouterr().out.splitlines()) == ["/docs/a.txt", "/docs/nested/c.txt"]


def test_cp_and_no_clobber(run, site: Path) -> None:
    assert run("cp", "/docs/a.txt", "/empty/") == 0
    assert (site / "empty" / "a.txt").read_text() == "alpha"
    assert run("cp", "/index.html", "/empty/a.txt") == 1
    assert (site / "empty" / "a.txt").read_text() == "alpha"
    assert run("cp", "-f", "/index.html", "/empty/a.txt") == 0
    assert (site / "empty" / "a.txt").read_text() == "<h1>home</h1>"


def test_mv(run, site: Path) -> None:
    assert run("mv", "/index.html", "/docs/") == 0
    assert (site / "docs" / "index.html").exists()


def test_mkdir_rmdir_rm(run, site: Path) -> None:
    assert run("mkdir", "/x/y") == 1
    assert run("mkdir", "-p", "/x/y") == 0
    assert (site / "x" / "y").is_dir()
    assert run("rmdir", "/x") == 1
    assert run("rmdir", "-r", "/x") == 0
    assert run("rm", "/docs") == 1
    assert run("rm", "-r", "/docs") == 0
    assert not (site / "docs").exists()


def test_profile_from_config(site: Path, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    conf_file = tmp_path / "conf.toml"
    conf_file.write_text(
        f'default_root = "{site}"\n'
        "[profile.docs]\n"
        'root = "docs"\n'
        'cwd = "nested"\n'
    )
    args = parse_arguments(["--conf-file", str(conf_file), "-s", "docs", "resolve", "c.txt"])
    assert main(args) == 0
    assert capsys.readouterr().out == f"{site}/docs/nested/c.txt\n"


def test_unknown_profile(run, capsys: pytest.CaptureFixture) -> None:
    assert run("-s", "nope", "pwd") == 1
    assert "not found" in capsys.readouterr().err


def test_list_profiles(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    conf_file = tmp_path / "conf.toml"
    conf_file.write_text('[profile.web]\nroot = "/srv/www"\numask = 0o027\n')
    assert main(parse_arguments(["--conf-file", str(conf_file), "list", "--profiles"])) == 0
    out = capsys.readouterr().out
    assert "Profile: web" in out
    assert " -root: /srv/www" in out
    assert " -umask: 0o27" in out


def test_rich_listing(run, capsys: pytest.CaptureFixture) -> None:
    pytest.importorskip("rich")
    assert run("-m", "ls", "/docs/*.txt") == 0
    assert "/docs/a.txt" in capsys.readouterr().out


def test_malformed_profile_fails(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    conf_file = tmp_path / "conf.toml"
    conf_file.write_text("[profile.default]\nroot = 5\n")
    assert main(parse_arguments(["--conf-file", str(conf_file), "pwd"])) == 1
    assert "'root' must be a string" in capsys.readouterr().err


def test_list_profiles_malformed_config_fails(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    conf_file = tmp_path / "conf.toml"
    conf_file.write_text('profile = "oops"\n')
    assert main(parse_arguments(["--conf-file", str(conf_file), "list", "--profiles"])) == 1
    assert capsys.readouterr().err.startswith("Error: ")
