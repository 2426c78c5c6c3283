"""LeftWM config parsing."""

from .descriptions import DESCRIPTIONS, get_description
from .errors import ConfigAccessError, ConfigError, ConfigScanError
from .models import KeyBind, LeftwmConfig
from .parser import default_config_path, parse_bind_line, parse_leftwm_config, split_modifiers

__all__ = [
    "DESCRIPTIONS",
    "ConfigAccessError",
    "ConfigError",
    "ConfigScanError",
    "KeyBind",
    "LeftwmConfig",
    "default_config_path",
    "get_description",
    "parse_bind_line",
    "parse_leftwm_config",
    "split_modifiers",
]
