"""Commands package initialization."""

from .accounts import AccountDirectory
from .errors import (
    ListingError,
    PathNotFoundError,
    PathPermissionError,
    MalformedMetadataError,
    ListingIOError,
)
from .executor import LsCommand
from .interpreter import CommandInterpreter, HELP_TEXT
from .models import ColorCategory, ColorTable, FileMetadata, Listing, Options

__all__ = [
    'AccountDirectory',
    'ListingError',
    'PathNotFoundError',
    'PathPermissionError',
    'MalformedMetadataError',
    'ListingIOError',
    'LsCommand',
    'CommandInterpreter',
    'HELP_TEXT',
    'ColorCategory',
    'ColorTable',
    'FileMetadata',
    'Listing',
    'Options',
]
