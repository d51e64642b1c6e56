"""termls package initialization.

Colorized, column-aligned directory listings.
"""

__version__ = '0.1.0'

from .commands import (
    LsCommand,
    CommandInterpreter,
    ListingError,
    Listing,
    Options,
    ColorTable,
)
from .utils.colors import ColorSpecResolver
from .utils.logger import get_logger

__all__ = [
    'LsCommand',
    'CommandInterpreter',
    'ListingError',
    'Listing',
    'Options',
    'ColorTable',
    'ColorSpecResolver',
    'get_logger',
]
