"""Allow running securebank as ``python -m securebank``."""

import sys

from securebank.cli import main

sys.exit(main())
