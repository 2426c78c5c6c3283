"""Screen listing the keybinds from config.ron."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Footer, Header

from ...config import LeftwmConfig
from ..widgets.keybinds_table import KeybindsTable

TABLE_TITLE = "LeftWM Keybinds"


class KeybindsScreen(Screen):
    """Display the user's LeftWM keybinds."""

    CSS = """
    KeybindsTable > .datatable--cursor {
        background: $primary;
    }
    """

    BINDINGS = [
        # Vim navigation for table
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("h", "cursor_left", "Left", show=False),
        Binding("l", "cursor_right", "Right", show=False),
        Binding("g", "go_top", "Top", show=False),
        Binding("G", "go_bottom", "Bottom", show=False),
    ]

    def __init__(self, config: LeftwmConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config

    def compose(self) -> ComposeResult:
        """Compose the keybinds screen."""
        yield Header()
        with Container(id="main-content"):
            yield KeybindsTable(self.config.keybindings, id="keybinds-table")
        yield Footer()

    def on_mount(self) -> None:
        """Title and focus the table."""
        table = self.query_one("#keybinds-table", KeybindsTable)
        table.border_title = TABLE_TITLE
        table.focus()

    def action_cursor_down(self) -> None:
        """Move cursor down in table."""
        self.query_one("#keybinds-table", KeybindsTable).action_cursor_down()

    def action_cursor_up(self) -> None:
        """Move cursor up in table."""
        self.query_one("#keybinds-table", KeybindsTable).action_cursor_up()

    def action_cursor_left(self) -> None:
        """Move cursor left in table."""
        self.query_one("#keybinds-table", KeybindsTable).action_cursor_left()

    def action_cursor_right(self) -> None:
        """Move cursor right in table."""
        self.query_one("#keybinds-table", KeybindsTable).action_cursor_right()

    def action_go_top(self) -> None:
        """Go to top of table."""
        self.query_one("#keybinds-table", KeybindsTable).move_cursor(row=0)

    def action_go_bottom(self) -> None:
        """Go to bottom of table."""
        table = self.query_one("#keybinds-table", KeybindsTable)
        if table.row_count:
            table.move_cursor(row=table.row_count - 1)
