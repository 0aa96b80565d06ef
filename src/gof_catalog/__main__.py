"""Allow `python -m gof_catalog`."""

import sys

from gof_catalog.cli import main

sys.exit(main())
