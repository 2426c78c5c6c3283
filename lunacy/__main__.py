"""Run lunacy with `python -m lunacy`."""

import sys

from .main import main

sys.exit(main())
