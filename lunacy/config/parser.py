"""Parser for LeftWM config.ron keybinds."""

import logging
import os
import re
from pathlib import Path
from typing import Iterable, Optional, Union

from .errors import ConfigAccessError, ConfigScanError
from .models import KeyBind, LeftwmConfig

logger = logging.getLogger(__name__)

CONFIG_RELATIVE_PATH = "/.config/leftwm/config.ron"

# Longest line the scanner accepts, in bytes
MAX_LINE_LENGTH = 64 * 1024

# (command: Execute, value: "rofi -show drun", modifier: ["modkey"], key: "space")
KEYBIND_PATTERN = re.compile(
    r'\(command: (\w+), value: "(.*?)", modifier: \[([^\]]*)\], key: "(.*?)"\)',
    re.ASCII,
)


def default_config_path() -> Path:
    """Return the LeftWM config path under $HOME.

    HOME is used as-is. When it is unset the path is rooted at '/', which
    will fail to open.
    """
    return Path(os.environ.get("HOME", "") + CONFIG_RELATIVE_PATH)


def split_modifiers(raw: str) -> list[str]:
    """Split a modifier list capture like '"modkey", "Shift"'.

    An empty capture gives [""], not [].
    """
    return [part.replace('"', "").strip() for part in raw.split(",")]


def parse_bind_line(line: str) -> Optional[KeyBind]:
    """Parse a single keybind line, or return None if it doesn't match."""
    match = KEYBIND_PATTERN.search(line)
    if not match:
        return None

    command, value, modifiers, key = match.groups()
    return KeyBind(
        command=command,
        value=value,
        modifier=split_modifiers(modifiers),
        key=key,
    )


def _parse_lines(lines: Iterable[bytes], path: str) -> list[KeyBind]:
    keybindings: list[KeyBind] = []
    # Only \n ends a line; a lone \r is part of the text
    for lineno, raw in enumerate(lines, start=1):
        raw = raw.removesuffix(b"\n").removesuffix(b"\r")
        if len(raw) > MAX_LINE_LENGTH:
            raise ConfigScanError(
                f"Line {lineno} of {path} exceeds {MAX_LINE_LENGTH} bytes", path
            )
        line = raw.decode("utf-8", errors="replace")
        if kb := parse_bind_line(line):
            keybindings.append(kb)
    return keybindings


def parse_leftwm_config(path: Optional[Union[str, Path]] = None) -> LeftwmConfig:
    """Parse a LeftWM configuration file.

    Args:
        path: Path to config.ron. If None, uses $HOME/.config/leftwm/config.ron

    Returns:
        Parsed LeftwmConfig with keybinds in file order

    Raises:
        ConfigAccessError: The file could not be opened.
        ConfigScanError: Reading failed before the end of the file.
    """
    if path is None:
        path = default_config_path()

    config_path = str(path)

    try:
        handle = open(config_path, "rb")
    except OSError as e:
        raise ConfigAccessError(f"Cannot open {config_path}: {e}", config_path) from e

    with handle:
        try:
            keybindings = _parse_lines(handle, config_path)
        except OSError as e:
            raise ConfigScanError(f"Error reading {config_path}: {e}", config_path) from e

    logger.debug("Parsed %d keybinds from %s", len(keybindings), config_path)

    return LeftwmConfig(path=config_path, keybindings=keybindings)
