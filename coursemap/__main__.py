"""Allow ``python -m coursemap``."""

import sys

from .cli import main

sys.exit(main())
