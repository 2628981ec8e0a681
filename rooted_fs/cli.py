#!/usr/bin/env python3
from dataclasses import replace
from typing import Optional, List
from pathlib import Path
import argparse
import os
import sys

from rooted_fs.config import (
    get_profile,
    read_default_root,
    read_profiles,
)
from rooted_fs.defaults import set_default_root
from rooted_fs.formatter import get_formatter
from rooted_fs.fs import FileSystem
from rooted_fs.logging_config import configure_logging
from rooted_fs.profile import Profile


def hr_rule():
    print("=" *20)


def list_settings(args):
    if args.profiles:
        print(f"Default root: {read_default_root(args.conf_file) or '/'}")
        hr_rule()
        for profile in read_profiles(args.conf_file):
            print(f"Profile: {profile.name}")
            print(f" -root: {profile.root}")
            print(f" -cwd: {profile.cwd}")
            print(f" -umask: {profile.umask:#o}")
            for extra_key, extra_val in profile.extra.items():
                print(f" -{extra_key}: {extra_val}")

            hr_rule()
            print()


def load_profile(args) -> Profile:
    """Pick the profile to open.

    Precedence order:
    1. The named profile from the configuration file.
    2. A blank ``default`` profile when no configuration exists.
    ``--root`` and ``--cwd`` then override the profile's values.
    """
    try:
        profile = get_profile(args.conf_file, args.profile)
    except KeyError:
        if args.profile != "default":
            raise
        profile = Profile(name="default")

    overrides = {}
    if args.root is not None:
        overrides["root"] = args.root
    if args.cwd is not None:
        overrides["cwd"] = args.cwd

    return replace(profile, **overrides)


def open_filesystem(args) -> FileSystem:
    default_root = read_default_root(args.conf_file)
    if default_root is not None and not set_default_root(default_root):
        raise NotADirectoryError(f"'{default_root}' is not a valid default root")

    profile = load_profile(args)
    fs = FileSystem(profile.root)
    fs.umask = profile.umask
    if not fs.change_directory(profile.cwd):
        raise NotADirectoryError(f"Can't change to '{profile.cwd}' under {fs.root}")

    return fs


def run_command(args, fs: FileSystem, formatter) -> bool:
    match args.mode:
        case "pwd":
            formatter.print_message(fs.pwd())
            return True

        case "resolve":
            sys_path = fs.to_system_path(args.path)
            if sys_path is None:
                return False
            formatter.print_message(sys_path)
            return True

        case "ls":
            paths = fs.list_files(args.pattern)
            formatter.print_paths(paths, fs)
            return bool(paths)

        case "find":
            paths = fs.find_files(args.pattern, args.directory)
            formatter.print_paths(paths, fs)
            return bool(paths)

        case "cp":
            return fs.copy(args.src, args.dst, args.force)

        case "mv":
            return fs.move(args.src, args.dst, args.force)

        case "rm":
            return fs.remove(args.path, args.recursive)

        case "mkdir":
            return fs.create_directory(args.path, args.parents)

        case "rmdir":
            return fs.remove_directory(args.path, args.recursive)

        case _:
            raise ValueError(f"Unknown command: {args.mode}")


def main(args) -> int:
    """Main execution flow for the script.  Returns the exit status."""
    configure_logging(args.log_level, args.log_file)

    if args.mode == "list":
        try:
            list_settings(args)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    if args.format_rich:
        try:
            import rich  # noqa: F401
        except ImportError:
            print("rich is not installed! Install rooted-fs[pretty].", file=sys.stderr)
            return 1

    try:
        fs = open_filesystem(args)
    except (KeyError, ValueError, NotADirectoryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    formatter = get_formatter(args.format_rich)
    return 0 if run_command(args, fs, formatter) else 1


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    config_dir = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "rooted-fs"
    conf_file: Path = config_dir / "conf.toml"

    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Manage files inside a confined root directory",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--conf-file",
        default=str(conf_file),
        help="Path to TOML file containing configuration",
    )
    parser.add_argument(
        "-s",
        dest="profile",
        default="default",
        help="Name of the profile to open in conf.toml",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Root directory, overrides the profile.  Nested under the default root.",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Directory inside the root to resolve relative paths against, overrides the profile.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of stderr.",
    )
    parser.add_argument(
        "-m",
        "--format-rich",
        action="store_true",
        help="If enabled, highlights directories in listings.  Needs the rich library.",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        required=True,
        help="Which command to run",
    )

    subparsers.add_parser("pwd", help="Prints the current directory inside the root.")

    resolve = subparsers.add_parser("resolve", help="Prints the filesystem path for a path inside the root.")
    resolve.add_argument("path")

    ls = subparsers.add_parser("ls", help="Lists entries matching a glob pattern.")
    ls.add_argument("pattern", nargs="?", default="*")

    find = subparsers.add_parser("find", help="Recursively lists entries matching a glob pattern.")
    find.add_argument("pattern", nargs="?", default="*")
    find.add_argument(
        "-d",
        "--directory",
        default=".",
        help="Directory to start searching from.",
    )

    for name, help_text in (("cp", "Copies a file or directory."), ("mv", "Moves a file or directory.")):
        transfer = subparsers.add_parser(name, help=help_text)
        transfer.add_argument("src")
        transfer.add_argument("dst", help="Destination.  End it with '/' to keep the source name.")
        transfer.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite an existing destination.",
        )

    rm = subparsers.add_parser("rm", help="Removes a file.")
    rm.add_argument("path")
    rm.add_argument("-r", "--recursive", action="store_true", help="Remove directories and their contents.")

    mkdir = subparsers.add_parser("mkdir", help="Creates a directory.")
    mkdir.add_argument("path")
    mkdir.add_argument("-p", "--parents", action="store_true", help="Create missing parent directories.")

    rmdir = subparsers.add_parser("rmdir", help="Removes a directory.")
    rmdir.add_argument("path")
    rmdir.add_argument("-r", "--recursive", action="store_true", help="Remove non-empty directories.")

    lister = subparsers.add_parser(
        "list",
        help="List details about the underlying configs",
    )
    lister.add_argument(
        "--profiles",
        dest="profiles",
        action="store_true",
        help="Lists the profiles configured on the system",
    )

    return parser.parse_args(argv)


def cli_entrypoint():
    args = parse_arguments()
    sys.exit(main(args))

if __name__ == "__main__":
    cli_entrypoint()
