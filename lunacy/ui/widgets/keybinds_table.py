"""Table widget for LeftWM keybinds."""

import logging
from typing import Sequence

from rich.text import Text
from textual import events
from textual.widgets import DataTable

from ...config import KeyBind

logger = logging.getLogger(__name__)

# (label, key, relative width)
COLUMNS = (
    ("Command", "command", 2),
    ("Modifier", "modifier", 1),
    ("Key", "key", 1),
)


def column_widths(total: int, weights: Sequence[int], padding: int = 1) -> list[int]:
    """Split `total` cells between columns in proportion to `weights`.

    `padding` is the cell padding on each side of a column and is taken off
    before splitting. Leftover cells go to the first column. Every column
    gets at least one cell.
    """
    available = total - 2 * padding * len(weights)
    if available < len(weights):
        return [1] * len(weights)

    weight_sum = sum(weights)
    widths = [available * weight // weight_sum for weight in weights]
    widths[0] += available - sum(widths)
    return widths


class KeybindsTable(DataTable):
    """A three column table of keybinds, sized by column weight."""

    DEFAULT_CSS = """
    KeybindsTable {
        height: 1fr;
        border: solid $primary;
        scrollbar-gutter: stable;
    }

    KeybindsTable:focus {
        border: solid $success;
    }
    """

    def __init__(self, keybindings: Sequence[KeyBind], **kwargs) -> None:
        kwargs.setdefault("fixed_columns", 1)
        super().__init__(**kwargs)
        self.keybindings = list(keybindings)

    def on_mount(self) -> None:
        """Fill the table on mount."""
        self.populate()

    def on_resize(self, event: events.Resize) -> None:
        """Re-spread column widths for the new size."""
        self.populate()

    def populate(self) -> None:
        """Rebuild columns and rows, keeping the cursor where it was."""
        cursor = self.cursor_coordinate

        usable = self.size.width - self.styles.scrollbar_size_vertical
        widths = column_widths(usable, [weight for _, _, weight in COLUMNS], self.cell_padding)

        self.clear(columns=True)
        for (label, key, _), width in zip(COLUMNS, widths):
            self.add_column(label, width=width, key=key)

        # Text cells so brackets in commands aren't read as markup
        for kb in self.keybindings:
            self.add_row(Text(kb.description), Text(kb.modifier_label), Text(kb.key))

        if self.row_count:
            self.move_cursor(row=cursor.row, column=cursor.column)

        logger.debug("Showing %d keybinds, column widths %s", self.row_count, widths)
