"""Allow ``python -m namesmith``."""

import sys

from namesmith.cli import main

sys.exit(main())
