"""Allow ``python -m hoarder_sync``."""

import sys

from hoarder_sync.cli import main

if __name__ == "__main__":
    sys.exit(main())
