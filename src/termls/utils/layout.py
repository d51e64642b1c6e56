"""
Multi-column layout for grid output
"""

import math
from typing import List, Sequence

from ..commands.models import ColumnLayout
from .logger import get_logger

logger = get_logger(__name__)

# A last column this much shorter than the first is considered degenerate
SHORT_COLUMN_MIN_GAP = 5


class ColumnLayoutEngine:
    """Finds the smallest row count whose column-major grid fits a line width.

    Entry ``p`` of ``n`` goes into column ``p // rows``.  A candidate that fits
    is still rejected when its last column holds at most half as many entries
    as the first and at least SHORT_COLUMN_MIN_GAP fewer, which avoids a
    visually short trailing column.
    """

    def __init__(self, separator_width: int = 2):
        self.separator_width = separator_width

    def _measure(self, widths: Sequence[int], rows: int):
        num_columns = math.ceil(len(widths) / rows)
        column_widths = [0] * num_columns
        column_counts = [0] * num_columns
        for index, width in enumerate(widths):
            column = index // rows
            column_widths[column] = max(column_widths[column], width)
            column_counts[column] += 1
        return column_widths, column_counts

    def line_width(self, column_widths: List[int]) -> int:
        if not column_widths:
            return 0
        return sum(column_widths) + self.separator_width * (len(column_widths) - 1)

    def fit(self, widths: Sequence[int], target_width: int) -> ColumnLayout:
        """Choose the row count and column widths for entries of the given widths.

        Args:
            widths: Display width of each entry, in final order
            target_width: Maximum line width

        Returns:
            ColumnLayout; zero rows when there are no entries
        """
        count = len(widths)
        if count == 0:
            return ColumnLayout(rows=0, column_widths=[])

        rows = 1
        while True:
            column_widths, column_counts = self._measure(widths, rows)
            total = self.line_width(column_widths)

            if total > target_width:
                if rows >= count:
                    # A single column still overflows; nothing narrower exists
                    break
                rows += 1
                continue

            first, last = column_counts[0], column_counts[-1]
            if last <= first // 2 and first - last >= SHORT_COLUMN_MIN_GAP:
                rows += 1
                continue
            break

        logger.debug(f"Grid layout: {count} entries in {rows} rows, {len(column_widths)} columns")
        return ColumnLayout(rows=rows, column_widths=column_widths)
