from __future__ import annotations

"""
Domain Constants.

Centralizes the markup vocabulary recognised and emitted by the file tree
processor: tag names, CSS class names, reserved icon identifiers and the
SVG attributes applied to every icon.
"""

import re
from typing import Dict, Pattern

# -----------------------------------------------------------------------------
# INPUT VOCABULARY
# -----------------------------------------------------------------------------

LIST_TAG = "ul"
LIST_ITEM_TAG = "li"
HIGHLIGHT_TAG = "strong"

# Text nodes made only of newlines are layout noise produced by the author markup
NEWLINES_ONLY_RX: Pattern[str] = re.compile(r"^\n+$")
DIRECTORY_NAME_RX: Pattern[str] = re.compile(r"/\s*$")
PLACEHOLDER_RX: Pattern[str] = re.compile(r"^\s*(\.{3}|…)\s*$")

# -----------------------------------------------------------------------------
# OUTPUT VOCABULARY
# -----------------------------------------------------------------------------

CLASS_FILE = "file"
CLASS_DIRECTORY = "directory"
CLASS_EMPTY = "empty"
CLASS_TREE_ENTRY = "tree-entry"
CLASS_HIGHLIGHT = "highlight"
CLASS_COMMENT = "comment"
CLASS_SR_ONLY = "sr-only"
CLASS_TREE_ICON = "tree-icon"

PLACEHOLDER_TEXT = "…"

# -----------------------------------------------------------------------------
# ICONS
# -----------------------------------------------------------------------------

FOLDER_ICON = "seti:folder"
DEFAULT_FILE_ICON = "seti:default"

SVG_ATTRIBUTES: Dict[str, str] = {
    "width": "16",
    "height": "16",
    "class": CLASS_TREE_ICON,
    "aria-hidden": "true",
    "viewBox": "0 0 24 24",
}
