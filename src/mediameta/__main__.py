"""Allow ``python -m mediameta``."""

import sys

from mediameta.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
