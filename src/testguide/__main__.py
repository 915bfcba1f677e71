# SPDX-License-Identifier: MIT
"""Package entry point — run testguide via `python -m testguide`."""

import sys

from testguide.cli import main

if __name__ == "__main__":
    sys.exit(main())
