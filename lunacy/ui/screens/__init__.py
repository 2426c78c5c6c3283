"""UI Screens."""

from .keybinds_view import KeybindsScreen

__all__ = ["KeybindsScreen"]
