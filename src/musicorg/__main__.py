"""Entry point for ``python -m musicorg``."""

import sys

from musicorg.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
