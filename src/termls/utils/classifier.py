"""
Color classification of listings
"""

from typing import Optional

from ..commands.models import ColorCategory, ColorKey, ColorTable, Listing


def extension_key(name: str) -> Optional[str]:
    """'file.name.txt' -> '*.txt'; names without a dot have no extension key."""
    if '.' not in name:
        return None
    return '*.' + name.rsplit('.', 1)[1]


class EntryClassifier:
    """Picks the single color category that applies to a listing.

    Rules are checked in a fixed order and the first match wins, so a
    world-writable sticky directory is never colored as a plain directory.
    """

    def __init__(self, color_table: ColorTable):
        self.color_table = color_table

    def classify(self, listing: Listing) -> Optional[ColorKey]:
        permissions = listing.permissions
        other_writable = permissions[8] == 'w'
        sticky = permissions[9] == 't'

        extension = extension_key(listing.name)
        if extension is not None and extension in self.color_table:
            return extension

        if listing.is_directory:
            if other_writable and sticky:
                return ColorCategory.DIRECTORY_OTHER_WRITABLE_STICKY
            if sticky:
                return ColorCategory.DIRECTORY_STICKY
            if other_writable:
                return ColorCategory.DIRECTORY_OTHER_WRITABLE
            return ColorCategory.DIRECTORY

        if listing.hard_links > 1:
            return ColorCategory.MULTI_HARDLINK

        if listing.is_symlink:
            if listing.link_orphan:
                return ColorCategory.LINK_ORPHAN
            return ColorCategory.SYMLINK

        if permissions[3] == 's':
            return ColorCategory.EXECUTABLE_SUID
        if permissions[6] == 's':
            return ColorCategory.EXECUTABLE_SGID
        if 'x' in permissions:
            return ColorCategory.EXECUTABLE

        if listing.is_socket:
            return ColorCategory.SOCKET
        if listing.is_pipe:
            return ColorCategory.PIPE
        if listing.is_block_device:
            return ColorCategory.BLOCK
        if listing.is_char_device:
            return ColorCategory.CHARACTER

        return None

    def escape_for(self, listing: Listing) -> Optional[str]:
        """Escape sequence for a listing.

        None when no category applies; '' when the category has no escape.
        """
        key = self.classify(listing)
        if key is None:
            return None
        return self.color_table.lookup(key)
