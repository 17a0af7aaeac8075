"""Allow running as: python -m league_overseer"""

import sys

from .cli import main

sys.exit(main())
