"""Errors raised while reading the LeftWM config."""


class ConfigError(Exception):
    """Base class for config read failures."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class ConfigAccessError(ConfigError):
    """The config file could not be opened."""


class ConfigScanError(ConfigError):
    """Reading the config file failed part way through."""
