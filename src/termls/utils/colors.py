"""
Color specification parsing

Two competing formats describe which escape sequence each kind of entry gets:
the BSD LSCOLORS string of positional foreground/background letter pairs, and
the System-V LS_COLORS list of key=code pairs.
"""

from typing import Dict, Optional

from ..commands.models import ColorCategory, ColorTable
from ..config import DEFAULT_LSCOLORS
from .logger import get_logger

logger = get_logger(__name__)

ESCAPE = '\x1b['

# LSCOLORS pair positions, in order
BSD_CATEGORIES = (
    ColorCategory.DIRECTORY,
    ColorCategory.SYMLINK,
    ColorCategory.SOCKET,
    ColorCategory.PIPE,
    ColorCategory.EXECUTABLE,
    ColorCategory.BLOCK,
    ColorCategory.CHARACTER,
    ColorCategory.EXECUTABLE_SUID,
    ColorCategory.EXECUTABLE_SGID,
    ColorCategory.DIRECTORY_OTHER_WRITABLE_STICKY,
    ColorCategory.DIRECTORY_OTHER_WRITABLE,
)

COLOR_OFFSETS = {
    'a': 0,  # black
    'b': 1,  # red
    'c': 2,  # green
    'd': 3,  # brown
    'e': 4,  # blue
    'f': 5,  # magenta
    'g': 6,  # cyan
    'h': 7,  # white
}

FOREGROUND_CODES = {}
BACKGROUND_CODES = {'x': ''}
for _letter, _offset in COLOR_OFFSETS.items():
    FOREGROUND_CODES[_letter] = f'0;{30 + _offset}'
    FOREGROUND_CODES[_letter.upper()] = f'1;{30 + _offset}'
    BACKGROUND_CODES[_letter] = f';{40 + _offset}'
    # Uppercase is a foreground-only letter; in the background slot it still
    # selects the foreground color code
    BACKGROUND_CODES[_letter.upper()] = f';{30 + _offset}'
FOREGROUND_CODES['x'] = '0;'

SYSV_KEYS = {
    'rs': ColorCategory.END,
    'di': ColorCategory.DIRECTORY,
    'ln': ColorCategory.SYMLINK,
    'mh': ColorCategory.MULTI_HARDLINK,
    'pi': ColorCategory.PIPE,
    'so': ColorCategory.SOCKET,
    'bd': ColorCategory.BLOCK,
    'cd': ColorCategory.CHARACTER,
    'or': ColorCategory.LINK_ORPHAN,
    'mi': ColorCategory.LINK_ORPHAN_TARGET,
    'su': ColorCategory.EXECUTABLE_SUID,
    'sg': ColorCategory.EXECUTABLE_SGID,
    'tw': ColorCategory.DIRECTORY_OTHER_WRITABLE_STICKY,
    'ow': ColorCategory.DIRECTORY_OTHER_WRITABLE,
    'st': ColorCategory.DIRECTORY_STICKY,
    'ex': ColorCategory.EXECUTABLE,
}

# Capabilities and doors are not supported
IGNORED_SYSV_KEYS = {'ca', 'do'}


def bsd_escape(code: str) -> str:
    """Turn one LSCOLORS letter pair such as 'ex' into an escape sequence.

    Letters outside a-h/A-H/x fall back to the default color.
    """
    foreground = FOREGROUND_CODES.get(code[0])
    if foreground is None:
        logger.debug(f"Unknown LSCOLORS foreground letter {code[0]!r}, using default")
        foreground = FOREGROUND_CODES['x']

    background = BACKGROUND_CODES.get(code[1])
    if background is None:
        logger.debug(f"Unknown LSCOLORS background letter {code[1]!r}, using default")
        background = BACKGROUND_CODES['x']

    return f'{ESCAPE}{foreground}{background}m'


class ColorSpecResolver:
    """Builds a ColorTable from whichever color specification is available."""

    def __init__(self, default_spec: str = DEFAULT_LSCOLORS):
        self.default_spec = default_spec

    def resolve(self, lscolors: Optional[str] = None, ls_colors: Optional[str] = None) -> ColorTable:
        """Resolve the color table for this invocation.

        Args:
            lscolors: BSD-style LSCOLORS value, takes priority when set
            ls_colors: System-V style LS_COLORS value

        Returns:
            The resolved ColorTable
        """
        if lscolors:
            logger.debug("Using colors from LSCOLORS")
            return self.parse_lscolors(lscolors)
        if ls_colors:
            logger.debug("Using colors from LS_COLORS")
            return self.parse_ls_colors(ls_colors)
        logger.debug(f"No color specification set, using default {self.default_spec}")
        return self.parse_lscolors(self.default_spec)

    @staticmethod
    def parse_lscolors(spec: str) -> ColorTable:
        categories: Dict[ColorCategory, str] = {}
        for position, category in enumerate(BSD_CATEGORIES):
            code = spec[position * 2:position * 2 + 2]
            if len(code) < 2:
                break
            categories[category] = bsd_escape(code)
        return ColorTable(categories=categories)

    @staticmethod
    def parse_ls_colors(spec: str) -> ColorTable:
        categories: Dict[ColorCategory, str] = {}
        extensions: Dict[str, str] = {}
        for item in spec.split(':'):
            if not item:
                continue
            try:
                key, code = item.split('=', 1)
            except ValueError:
                logger.debug(f"Skipping malformed LS_COLORS entry {item!r}")
                continue

            if key in IGNORED_SYSV_KEYS:
                continue

            escape = f'{ESCAPE}{code}m'
            if key in SYSV_KEYS:
                categories[SYSV_KEYS[key]] = escape
            else:
                extensions[key] = escape
        return ColorTable(categories=categories, extensions=extensions)
