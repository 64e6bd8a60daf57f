"""Run the steam-bvdf command line: ``python -m steambvdf``."""

import sys

from steambvdf.main import main

sys.exit(main())
