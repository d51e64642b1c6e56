"""Output formatter for listings."""
from typing import List, Sequence

from ..commands.models import ColorCategory, ColorTable, Listing, Options
from ..config import GRID_SEPARATOR
from .classifier import EntryClassifier
from .layout import ColumnLayoutEngine


class Renderer:
    """Render listings as long form, one per line, or a grid."""

    def __init__(self, options: Options, color_table: ColorTable = None):
        """Initialize the renderer.

        Args:
            options: Invocation options; selects the output mode
            color_table: Resolved colors. Ignored when color output is off.
        """
        self.options = options
        self.color_table = color_table or ColorTable()
        self.classifier = EntryClassifier(self.color_table)
        self.layout_engine = ColumnLayoutEngine(separator_width=len(GRID_SEPARATOR))

    @property
    def colorize(self) -> bool:
        return self.options.color

    def format_name(self, listing: Listing) -> str:
        """Format a listing's name, with color and, in long form, its link target."""
        name = listing.name
        if self.colorize:
            escape = self.classifier.escape_for(listing)
            if escape is not None:
                name = f"{escape}{name}{self.color_table.end}"

        if listing.is_symlink and self.options.long and listing.link_target is not None:
            target = listing.link_target
            if listing.link_orphan and self.colorize:
                orphan_escape = self.color_table.lookup(ColorCategory.LINK_ORPHAN_TARGET)
                target = f"{orphan_escape}{target}{self.color_table.end}"
            name = f"{name} -> {target}"
        return name

    def render(self, listings: Sequence[Listing], width: int) -> str:
        """Render listings in the mode selected by the options.

        Returns:
            The rendered text without a trailing newline, '' for no listings
        """
        if not listings:
            return ""
        if self.options.long:
            lines = self.render_long(listings)
        elif self.options.one_per_line:
            lines = [self.format_name(l) for l in listings]
        else:
            lines = self.render_grid(listings, width)
        return '\n'.join(lines)

    def render_long(self, listings: Sequence[Listing]) -> List[str]:
        width_permissions = max(len(l.permissions) for l in listings)
        width_links = max(2, max(len(l.hard_link_count) for l in listings))
        width_owner = max(len(l.owner) for l in listings)
        width_group = max(len(l.group) for l in listings)
        width_size = max(len(l.size) for l in listings)
        width_time = max(len(l.time_or_year) for l in listings)

        lines = []
        for l in listings:
            fields = [
                l.permissions.ljust(width_permissions),
                l.hard_link_count.rjust(width_links),
                l.owner.ljust(width_owner),
                l.group.ljust(width_group),
                l.size.rjust(width_size),
                l.month,
                l.day,
                l.time_or_year.rjust(width_time),
                self.format_name(l),
            ]
            lines.append(' '.join(fields))
        return lines

    def render_grid(self, listings: Sequence[Listing], width: int) -> List[str]:
        layout = self.layout_engine.fit([len(l.name) for l in listings], width)
        if layout.rows == 0:
            return []

        lines = []
        for row in range(layout.rows):
            indices = range(row, len(listings), layout.rows)
            cells = []
            for position, index in enumerate(indices):
                listing = listings[index]
                cell = self.format_name(listing)
                if position < len(indices) - 1:
                    padding = layout.column_widths[layout.column_of(index)] - len(listing.name)
                    cell += ' ' * padding
                cells.append(cell)
            lines.append(GRID_SEPARATOR.join(cells))
        return lines
