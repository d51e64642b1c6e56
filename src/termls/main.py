"""Main entry point for termls."""

import os
import shutil
import sys
from typing import List, Optional, TextIO

from .config import (
    DEFAULT_TERMINAL_WIDTH,
    get_color_specs,
    get_columns_override,
    load_environment,
)
from .commands.executor import LsCommand
from .commands.interpreter import CommandInterpreter, HELP_TEXT
from .utils.colors import ColorSpecResolver
from .utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def merge_stdin_arguments(args: List[str], stream: Optional[TextIO] = None) -> List[str]:
    """Append whitespace-separated words piped on stdin to the arguments.

    Nothing is read when the stream is a terminal.
    """
    stream = sys.stdin if stream is None else stream
    if stream is None or stream.isatty():
        return list(args)
    return list(args) + stream.read().split()


def write_text(text: str, stream: Optional[TextIO] = None):
    """Write text to a standard stream as filesystem bytes.

    Names that are not valid UTF-8 arrive surrogate-escaped and are written
    back out as their original bytes.
    """
    stream = sys.stdout if stream is None else stream
    stream.flush()
    stream.buffer.write(os.fsencode(text))
    stream.buffer.flush()


def terminal_width() -> int:
    """Width for grid output: TERMLS_COLUMNS, then the terminal, then the default."""
    override = get_columns_override()
    if override is not None:
        return override
    columns = shutil.get_terminal_size(fallback=(DEFAULT_TERMINAL_WIDTH, 24)).columns
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def run(args: List[str]) -> int:
    """Run one invocation with already-merged arguments."""
    options, paths = CommandInterpreter().interpret(args)
    logger.debug(f"Options: {options}, paths: {paths}")

    if options.show_help:
        print(HELP_TEXT)
        return 0

    color_table = None
    if options.color:
        lscolors, ls_colors = get_color_specs()
        color_table = ColorSpecResolver().resolve(lscolors, ls_colors)

    command = LsCommand(options, color_table)
    output, error = command.execute(paths, terminal_width())

    if output:
        write_text(f"{output}\n")
    if error:
        for line in error.splitlines():
            write_text(f"termls: {line}\n", sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    env_path = load_environment()
    setup_logging()
    if env_path:
        logger.debug(f"Loaded environment from {env_path}")

    args = sys.argv[1:] if argv is None else argv
    try:
        args = merge_stdin_arguments(args)
    except OSError as e:
        logger.error(f"Error reading arguments from stdin: {e}")
        return 1
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
