"""Allow ``python -m radiopress``."""

import sys

from radiopress.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
