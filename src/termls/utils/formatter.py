"""
Field formatting utilities
"""

import datetime
import time
from typing import Optional, Tuple

from ..config import SIX_MONTHS_SECONDS, FUTURE_SLACK_SECONDS

SIZE_SUFFIXES = 'BKMGTPE'
MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')


def human_size(size: int) -> str:
    """Format a byte count with a binary unit suffix.

    >>> human_size(1536)
    '1.5K'
    """
    value = float(size)
    count = 0
    while value >= 1.0:
        value /= 1024
        count += 1
    if count > 0:
        value *= 1024
        count -= 1

    suffix = SIZE_SUFFIXES[count] if count < len(SIZE_SUFFIXES) else '?'
    if count == 0:
        text = f"{int(value)}{suffix}"
    else:
        text = f"{value:.1f}{suffix}"

    # 14.0K -> 14K
    if len(text) > 3 and text[-3:-1] == '.0':
        text = text[:-3] + suffix
    return text


def format_size(size: int, human: bool = False) -> str:
    return human_size(size) if human else str(size)


def format_timestamp(mtime_ns: int, now: Optional[float] = None) -> Tuple[str, str, str]:
    """Return (month, day, time-or-year) for a modification time.

    Within the last six months the time of day is shown, otherwise the year.
    Timestamps more than a few seconds in the future also show the year.

    Args:
        mtime_ns: Modification time in nanoseconds since the epoch
        now: Current time in seconds since the epoch; defaults to time.time()
    """
    if now is None:
        now = time.time()
    epoch_now = int(now)
    epoch_modified = mtime_ns // 1_000_000_000
    modified = datetime.datetime.fromtimestamp(epoch_modified)

    if (epoch_modified <= epoch_now - SIX_MONTHS_SECONDS or
            epoch_modified >= epoch_now + FUTURE_SLACK_SECONDS):
        time_or_year = str(modified.year)
    else:
        time_or_year = f"{modified.hour:02d}:{modified.minute:02d}"

    return MONTHS[modified.month - 1], f"{modified.day:02d}", time_or_year
