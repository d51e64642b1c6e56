"""
Ordering of listings
"""

import re
from typing import Iterable, List

from ..commands.models import Listing, Options

LEADING_INTEGER = re.compile(r'\d+')


def name_key(listing: Listing) -> bytes:
    """Case-insensitive byte-wise key; a strict prefix sorts first."""
    return listing.name.lower().encode('utf-8', 'surrogateescape')


def time_key(listing: Listing) -> int:
    return listing.mod_time_nanos


def size_key(listing: Listing) -> int:
    """Leading integer of the displayed size.

    Human-readable sizes compare by their displayed magnitude, so '512B'
    outranks '14K' and '1.5K' counts as 1.
    """
    match = LEADING_INTEGER.match(listing.size)
    return int(match.group()) if match else 0


class Sorter:
    """Sorts listings according to the invocation options."""

    def __init__(self, options: Options):
        self.options = options

    def sort(self, listings: Iterable[Listing]) -> List[Listing]:
        if self.options.sort_by_time:
            ordered = sorted(listings, key=time_key, reverse=True)
        elif self.options.sort_by_size:
            ordered = sorted(listings, key=size_key, reverse=True)
        else:
            ordered = sorted(listings, key=name_key)

        if self.options.sort_reverse:
            ordered.reverse()
        return ordered

    @staticmethod
    def dirs_first(listings: Iterable[Listing]) -> List[Listing]:
        """Move directories to the front, keeping the order within each group."""
        listings = list(listings)
        directories = [l for l in listings if l.is_directory]
        others = [l for l in listings if not l.is_directory]
        return directories + others
