"""Allow ``python -m weighted_picker``."""

import sys

from weighted_picker.cli import main

if __name__ == "__main__":
    sys.exit(main())
