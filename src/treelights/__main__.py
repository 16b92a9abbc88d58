"""Allow ``python -m treelights``."""

import sys

from treelights.cli import main

sys.exit(main())
