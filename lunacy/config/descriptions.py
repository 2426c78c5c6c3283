"""Human-readable descriptions for LeftWM commands."""

from types import MappingProxyType

DESCRIPTIONS = MappingProxyType(
    {
        "Execute": "Execute",
        "CloseWindow": "Close Window",
        "CloseAllOtherWindows": "Close All Other Windows",
        "SoftReload": "Soft Reload",
        "MoveToLastWorkspace": "Move to Last Workspace",
        "SwapTags": "Swap Tags",
        "HardReload": "Hard Reload",
        "ToggleFullScreen": "Toggle Fullscreen",
        "ToggleMaximized": "Toggle Maximize",
        "ToggleSticky": "Toggle Sticky Window",
        "GotoTag": "Go to tag",
        "ReturnToLastTag": "Return To Last Tag",
        "FloatingToTile": "Floating To Tile",
        "TileToFloating": "Tile to Floating",
        "ToggleFloating": "Toggle Floating",
        "MoveWindowUp": "Move Window Up",
        "MoveWindowDown": "Move Window Down",
        "MoveWindowTop": "Move Window Top",
        "SwapWindowTop": "Swap Window Top",
        "FocusWindowUp": "Focus Window Up",
        "FocusWindowDown": "Focus Window Down",
        "FocusWindowTop": "Focus Window Top",
        "FocusWorkspaceNext": "Focus Workspace Next",
        "FocusWorkspacePrevious": "Focus Workspace Previous",
        "MoveWindowToNextTag": "Move Window To Next Tag",
        "MoveWindowToPreviousTag": "Move Window To Previous Tag",
        "MoveWindowToNextWorkspace": "Move Window To Next Workspace",
        "MoveWindowToPreviousWorkspace": "Move Window To Next Workspace",
        "NextLayout": "Next Layout",
        "PreviousLayout": "Previous Layout",
        "IncreaseMainSize": "Increase Main Size",
        "DecreaseMainSize": "Decrease Main Size",
        "IncreaseMainCount": "Decrease Main Count",
        "DecreaseMainCount": "Decrease Main Count",
        "UnloadTheme": "Unload Theme",
    }
)

# Commands whose description embeds the bound value
_VALUE_PREFIXES = {
    "MoveToTag": "Move to Tag ",
    "GotoTag": "Go to Tag ",
    "Execute": "Execute ",
}


def get_description(command: str, value: str) -> str:
    """Resolve the display text for a command.

    Tag and execute commands get their value appended, even when it is
    empty. Anything else comes from DESCRIPTIONS, falling back to the raw
    command name.
    """
    prefix = _VALUE_PREFIXES.get(command)
    if prefix is not None:
        return prefix + value
    return DESCRIPTIONS.get(command, command)
