"""Run the planabrain CLI with ``python -m planabrain``."""

import sys

from planabrain.cli import main

sys.exit(main())
