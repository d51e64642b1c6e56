"""
Filesystem scanning: raw metadata and Listing construction
"""

import os
import stat
import time
from contextlib import contextmanager
from typing import List, Optional

from .accounts import AccountDirectory
from .errors import (
    ListingIOError,
    MalformedMetadataError,
    PathNotFoundError,
    PathPermissionError,
)
from .models import FileMetadata, Listing, ModeDescriptor, Options
from ..utils.formatter import format_size, format_timestamp
from ..utils.logger import get_logger
from ..utils.permissions import mode_string, normalize_permissions

logger = get_logger(__name__)


@contextmanager
def translate_os_errors(path: str):
    """Re-raise OS errors for a path as listing errors."""
    try:
        yield
    except FileNotFoundError:
        raise PathNotFoundError(path)
    except PermissionError:
        raise PathPermissionError(path)
    except OSError as e:
        raise ListingIOError(f"{path}: {e.strerror or e}")


def link_is_orphan(link_path: str, target: str) -> bool:
    """True when a symlink's target does not exist.

    Relative targets are resolved against the directory holding the link.
    Failures other than "not found" propagate.
    """
    resolved = os.path.join(os.path.dirname(link_path), target)
    try:
        os.stat(resolved)
    except FileNotFoundError:
        return True
    return False


def read_metadata(path: str, name: Optional[str] = None, follow_symlinks: bool = False) -> FileMetadata:
    """Read the metadata of one entry.

    Args:
        path: Path of the entry
        name: Display name; defaults to the path itself
        follow_symlinks: stat the link target instead of the link

    Returns:
        FileMetadata for the entry
    """
    st = os.stat(path) if follow_symlinks else os.lstat(path)

    link_target = None
    link_orphan = False
    if stat.S_ISLNK(st.st_mode):
        link_target = os.readlink(path)
        link_orphan = link_is_orphan(path, link_target)

    return FileMetadata(
        name=path if name is None else name,
        mode=st.st_mode,
        nlink=st.st_nlink,
        uid=st.st_uid,
        gid=st.st_gid,
        size=st.st_size,
        mtime_ns=st.st_mtime_ns,
        link_target=link_target,
        link_orphan=link_orphan,
    )


class ListingBuilder:
    """Converts FileMetadata into printable Listings."""

    def __init__(self, options: Options, accounts: AccountDirectory, now: Optional[float] = None):
        self.options = options
        self.accounts = accounts
        self.now = time.time() if now is None else now

    def build(self, metadata: FileMetadata) -> Listing:
        mode = metadata.mode
        is_symlink = stat.S_ISLNK(mode)
        permissions = normalize_permissions(
            ModeDescriptor(mode_string=mode_string(mode), is_symlink=is_symlink)
        )

        try:
            month, day, time_or_year = format_timestamp(metadata.mtime_ns, self.now)
        except (OverflowError, OSError, ValueError) as e:
            raise MalformedMetadataError(f"{metadata.name}: unusable modification time: {e}")

        return Listing(
            permissions=permissions,
            hard_link_count=str(metadata.nlink),
            owner=self.accounts.owner_name(metadata.uid),
            group=self.accounts.group_name(metadata.gid),
            size=format_size(metadata.size, self.options.human),
            mod_time_nanos=metadata.mtime_ns,
            month=month,
            day=day,
            time_or_year=time_or_year,
            name=metadata.name,
            link_target=metadata.link_target if is_symlink else None,
            link_orphan=metadata.link_orphan,
            is_char_device=stat.S_ISCHR(mode),
            is_block_device=stat.S_ISBLK(mode),
            is_pipe=stat.S_ISFIFO(mode),
            is_socket=stat.S_ISSOCK(mode),
        )

    def build_path(self, path: str, name: Optional[str] = None, follow_symlinks: bool = False) -> Listing:
        """Read and build the Listing for a single path."""
        with translate_os_errors(path):
            metadata = read_metadata(path, name, follow_symlinks)
        return self.build(metadata)


class DirectoryScanner:
    """Reads the entries of a directory into Listings."""

    def __init__(self, options: Options, builder: ListingBuilder):
        self.options = options
        self.builder = builder

    def scan(self, directory: str) -> List[Listing]:
        """List a directory's contents, unsorted.

        With the 'all' option, '.' and '..' come first and dotfiles are kept.
        """
        listings = []
        if self.options.all:
            listings.append(self.builder.build_path(directory, '.', follow_symlinks=True))
            listings.append(
                self.builder.build_path(os.path.join(directory, '..'), '..', follow_symlinks=True)
            )

        try:
            with os.scandir(directory) as it:
                entries = [(entry.name, entry.path) for entry in it]
        except FileNotFoundError:
            raise ListingIOError(f"{directory}: no such file or directory")
        except PermissionError:
            raise PathPermissionError(directory)
        except OSError as e:
            raise ListingIOError(f"failed to open directory {directory}: {e.strerror or e}")

        for name, path in entries:
            if name.startswith('.') and not self.options.all:
                continue
            try:
                listings.append(self.builder.build_path(path, name))
            except PathNotFoundError:
                raise ListingIOError(f"{path}: entry disappeared while listing {directory}")

        logger.debug(f"Scanned {directory}: {len(listings)} entries")
        return listings
