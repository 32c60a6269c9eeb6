"""Allow running zmkview as ``python -m zmkview``."""

import sys

from zmkview.cli import main


if __name__ == "__main__":
    sys.exit(main())
