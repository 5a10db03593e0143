"""Allow ``python -m consoleapp``."""

import sys

from consoleapp.app import main

sys.exit(main())
