from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path resolution for persistent user data and the text I/O used by the CLI
to read author markup and write the processed result.
"""

import os
import sys
from typing import Optional

APP_DIR_NAME = "FileTreeMarkup"
UNIX_APP_DIR_NAME = ".filetree_markup"
STDIO_PATH = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    - Windows: %LOCALAPPDATA%/FileTreeMarkup
    - Linux/Mac: ~/.filetree_markup

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy of a file if missing."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)


# -----------------------------------------------------------------------------
# TEXT I/O
# -----------------------------------------------------------------------------

def read_text(path: Optional[str]) -> str:
    """Read a UTF-8 text file, or stdin when path is empty or '-'."""
    if not path or path == STDIO_PATH:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_text(path: Optional[str], content: str) -> None:
    """Write UTF-8 text to a file, or stdout when path is empty or '-'."""
    if not path or path == STDIO_PATH:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
        return
    ensure_parent_dir(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
