"""UI Widgets."""

from .keybinds_table import KeybindsTable, column_widths

__all__ = ["KeybindsTable", "column_widths"]
