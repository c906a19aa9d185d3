from __future__ import annotations

"""
Main Entry Point.

Routes execution to the CLI controller so the tool can be started with
'python -m fixtree.main' or through the 'fixtree' console script.
"""

import os
import sys

# Anti-shadowing and path visibility logic when run as a plain script
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from fixtree.interface.cli.app import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
