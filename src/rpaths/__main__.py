"""Allow ``python -m rpaths``."""

import sys

from rpaths.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
