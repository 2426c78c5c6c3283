"""Main Textual application."""

from textual.app import App
from textual.binding import Binding

from ..config import LeftwmConfig
from .screens import KeybindsScreen


class LunacyApp(App):
    """Full-screen viewer for LeftWM keybinds."""

    TITLE = "lunacy"
    SUB_TITLE = "LeftWM Keybinds"

    CSS = """
    Screen {
        background: $surface;
    }

    #main-content {
        width: 100%;
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "q:Quit", show=True),
        Binding("?", "help", "?:Help", show=True),
    ]

    def __init__(self, config: LeftwmConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config

    def on_mount(self) -> None:
        """Show the keybinds table."""
        self.push_screen(KeybindsScreen(self.config))

    def action_help(self) -> None:
        """Show help."""
        self.notify(
            "Navigation: j/k=Down/Up, h/l=Left/Right, g/G=Top/Bottom\n"
            "Arrows and PgUp/PgDn also work\n"
            "Other: q=Quit",
            title="Keybindings",
            timeout=10,
        )
