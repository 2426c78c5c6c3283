"""lunacy - view LeftWM keybindings in the terminal."""

__version__ = "0.1.0"
