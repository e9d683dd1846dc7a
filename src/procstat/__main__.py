"""Allow running procstat with ``python -m procstat``."""

import sys

from procstat.app import main

sys.exit(main())
