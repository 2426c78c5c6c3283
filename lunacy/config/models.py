"""Pydantic models for LeftWM keybindings."""

from pydantic import BaseModel, ConfigDict, Field

from .descriptions import get_description


class KeyBind(BaseModel):
    """A single keybind entry from config.ron."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(description="LeftWM command (e.g., 'Execute', 'GotoTag')")
    value: str = Field(default="", description="Command argument, may be empty")
    modifier: list[str] = Field(
        default_factory=list, description="Modifier keys in config order"
    )
    key: str = Field(description="The key (e.g., 'space', 'Return')")

    @property
    def modifier_label(self) -> str:
        """Return modifiers joined for display, like 'modkey, Shift'."""
        return ", ".join(self.modifier)

    @property
    def description(self) -> str:
        """Return the human-readable description of the command."""
        return get_description(self.command, self.value)


class LeftwmConfig(BaseModel):
    """Keybinds parsed from a LeftWM config file."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Path to the config file")
    keybindings: list[KeyBind] = Field(default_factory=list)
