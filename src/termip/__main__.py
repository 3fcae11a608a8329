"""Allow ``python -m termip``."""

import sys

from termip.cli import main

sys.exit(main())
