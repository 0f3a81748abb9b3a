"""Allow `python -m smartcommit`."""

import sys

from smartcommit.cli.main import main

sys.exit(main())
