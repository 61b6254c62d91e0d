"""Allow ``python -m wavemesh``."""

import sys

from wavemesh.cli import main

sys.exit(main())
