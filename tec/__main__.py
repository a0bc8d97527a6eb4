"""Allow running TEC as ``python -m tec``."""

import sys

from tec.cli import main

sys.exit(main())
