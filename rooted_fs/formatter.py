import sys
from typing import Iterable

from .fs import FileSystem


class PathFormatter:
    def __init__(self, out_block):
        self.out_block = out_block

    def print_paths(self, paths: Iterable[str], fs: FileSystem):
        """Prints one local path per line."""
        raise NotImplementedError()

    def print_message(self, message: str):
        """Prints a single line of output."""
        raise NotImplementedError()


class RawTextFormatter(PathFormatter):
    """Formats paths as raw text, directories marked with a trailing slash."""
    def print_paths(self, paths: Iterable[str], fs: FileSystem):
        for path in paths:
            suffix = "/" if path != "/" and fs.is_dir(path) else ""
            self.out_block.write(f"{path}{suffix}\n")

        self.out_block.flush()

    def print_message(self, message: str):
        self.out_block.write(f"{message}\n")
        self.out_block.flush()


class RichFormatter(PathFormatter):
    """Formats paths with the rich library, directories highlighted."""

    def __init__(self, out_block):
        super().__init__(out_block)
        from rich.console import Console
        self.out_block_console = Console(file=self.out_block, highlight=False)

    def print_paths(self, paths: Iterable[str], fs: FileSystem):
        from rich.text import Text
        for path in paths:
            if fs.is_dir(path):
                self.out_block_console.print(Text(path, style="bold blue"))
            else:
                self.out_block_console.print(Text(path))

    def print_message(self, message: str):
        from rich.text import Text
        self.out_block_console.print(Text(message))


def get_formatter(format_rich, out_block=None):
    if out_block is None:
        out_block = sys.stdout

    if format_rich:
        return RichFormatter(out_block)
    else:
        return RawTextFormatter(out_block)
