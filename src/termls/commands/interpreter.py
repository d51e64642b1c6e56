"""
Command-line interpretation for termls
"""

from typing import List, Tuple

from .models import Options
from ..utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = (
    "usage:  ls [OPTIONS] [FILES]\n\n"
    "OPTIONS:\n"
    "    --dirs-first  list directories first\n"
    "    --help        display usage information\n"
    "    --nocolor     remove color formatting\n"
    "    -1            one entry per line\n"
    "    -a            include entries starting with '.'\n"
    "    -d            list directories like files\n"
    "    -h            list sizes with human-readable units\n"
    "    -l            long listing\n"
    "    -r            reverse any sorting\n"
    "    -t            sort entries by modify time\n"
    "    -S            sort entries by size"
)


class CommandInterpreter:
    """Splits arguments into Options and paths."""

    LONG_OPTIONS = {
        '--dirs-first': ('dirs_first', True),
        '--help': ('show_help', True),
        '--nocolor': ('color', False),
    }

    # Short option letters may be combined, e.g. -lah
    SHORT_OPTIONS = {
        '1': 'one_per_line',
        'a': 'all',
        'd': 'treat_dir_as_file',
        'h': 'human',
        'l': 'long',
        'r': 'sort_reverse',
        't': 'sort_by_time',
        'S': 'sort_by_size',
    }

    def interpret(self, args: List[str]) -> Tuple[Options, List[str]]:
        """Interpret raw arguments.

        Args:
            args: Arguments without the program name

        Returns:
            Tuple of (options, paths)
        """
        flags = {}
        paths = []
        for arg in args:
            if not arg:
                continue
            if not arg.startswith('-') or arg == '-':
                paths.append(arg)
            elif arg.startswith('--'):
                if arg in self.LONG_OPTIONS:
                    field, value = self.LONG_OPTIONS[arg]
                    flags[field] = value
                else:
                    logger.debug(f"Ignoring unknown option {arg}")
            else:
                for letter in arg[1:]:
                    if letter in self.SHORT_OPTIONS:
                        flags[self.SHORT_OPTIONS[letter]] = True
                    else:
                        logger.debug(f"Ignoring unknown option letter {letter!r} in {arg}")

        return Options(**flags), paths
