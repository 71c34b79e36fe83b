from __future__ import annotations

"""
Main Entry Point.

Makes the package importable when the script is executed directly from a
source checkout and delegates to the CLI controller.
"""

import os
import sys

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from filetree_markup.interface.cli.app import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
