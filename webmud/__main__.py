"""Allow ``python -m webmud``."""

import sys

from webmud.cli import main

sys.exit(main())
