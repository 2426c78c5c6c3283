"""Entry point for lunacy."""

import logging
import sys

from textual.logging import TextualHandler

from .config import ConfigError, parse_leftwm_config
from .ui.app import LunacyApp

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.WARNING) -> None:
    """Route log records to the Textual devtools console."""
    logging.basicConfig(level=level, handlers=[TextualHandler()], force=True)


def main() -> int:
    """Parse the LeftWM config and show its keybinds."""
    configure_logging()

    try:
        config = parse_leftwm_config()
    except ConfigError as e:
        logger.debug("Failed to read %s", e.path, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    app = LunacyApp(config)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
