"""
Listing execution: from command-line paths to the final text
"""

import os
from typing import List, Optional, Tuple

from .accounts import AccountDirectory
from .errors import ListingError, PathNotFoundError
from .models import ColorTable, Listing, Options
from .scanner import DirectoryScanner, ListingBuilder
from ..utils.logger import get_logger
from ..utils.output_formatter import Renderer
from ..utils.sorter import Sorter

logger = get_logger(__name__)

BLOCK_SEPARATOR = '\n\n'


class LsCommand:
    """List files and directories given on the command line."""

    def __init__(self, options: Options, color_table: ColorTable = None,
                 accounts: AccountDirectory = None, now: float = None):
        """Initialize the command.

        Args:
            options: Parsed invocation options
            color_table: Resolved color table; only used when color is on
            accounts: uid/gid name tables; loaded from the system when omitted
            now: Reference time for timestamp formatting, defaults to the current time
        """
        self.options = options
        self.accounts = accounts if accounts is not None else AccountDirectory.load()
        self.builder = ListingBuilder(options, self.accounts, now)
        self.scanner = DirectoryScanner(options, self.builder)
        self.sorter = Sorter(options)
        self.renderer = Renderer(options, color_table)

    def _separate(self, paths: List[str], errors: List[str]) -> Tuple[List[Listing], List[Listing]]:
        """Split arguments into file and directory listings.

        Missing paths are recorded in errors and skipped.
        """
        files, dirs = [], []
        for path in paths:
            try:
                listing = self.builder.build_path(path)
            except PathNotFoundError as e:
                logger.debug(f"Skipping missing argument {path}")
                errors.append(str(e))
                continue

            if listing.is_directory and not self.options.treat_dir_as_file:
                dirs.append(listing)
            else:
                files.append(listing)
        return files, dirs

    def list_directory(self, directory: Listing) -> List[Listing]:
        listings = self.sorter.sort(self.scanner.scan(directory.name))
        if self.options.dirs_first:
            listings = Sorter.dirs_first(listings)
        return listings

    def _write_output(self, blocks: List[str], files: List[Listing],
                      dirs: List[Listing], width: int):
        if files and not self.options.dirs_first:
            blocks.append(self.renderer.render(files, width))

        if (files and dirs) or len(dirs) > 1:
            for directory in dirs:
                header = f"{self.renderer.format_name(directory)}:"
                body = self.renderer.render(self.list_directory(directory), width)
                blocks.append(f"{header}\n{body}" if body else header)
        elif dirs:
            blocks.append(self.renderer.render(self.list_directory(dirs[0]), width))

        if files and self.options.dirs_first:
            blocks.append(self.renderer.render(files, width))

    def execute(self, paths: List[str], width: int) -> Tuple[str, Optional[str]]:
        """Produce the listing text.

        Args:
            paths: Paths from the command line; the current directory when empty
            width: Line width for grid output

        Returns:
            Tuple of (output, error_message)
            output: Everything rendered, without a trailing newline
            error_message: None on success, otherwise the error text
        """
        paths = paths or ['.']
        errors: List[str] = []
        blocks: List[str] = []

        try:
            files, dirs = self._separate(paths, errors)
            files = self.sorter.sort(files)
            dirs = self.sorter.sort(dirs)
            self._write_output(blocks, files, dirs, width)
        except ListingError as e:
            logger.debug(f"Listing failed: {e}")
            errors.append(str(e))

        output = BLOCK_SEPARATOR.join(blocks)
        return output, '\n'.join(errors) if errors else None
