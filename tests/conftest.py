from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: small icon tables, a glyph table and a markup parser.
"""

import os
import sys
from typing import Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from bs4.element import Tag  # noqa: E402

from filetree_markup.core.pipeline.stages.parser import parse_fragment  # noqa: E402
from filetree_markup.domain.tree_models import Definitions  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def definitions() -> Definitions:
    """Minimal icon tables covering each resolution step."""
    return Definitions(
        files={"LICENSE": "seti:license", "package.json": "seti:npm"},
        extensions={".md": "seti:markdown", ".json": "seti:json", ".d.ts": "seti:typescript"},
        partials={"webpack": "seti:webpack", "eslint": "seti:eslint"},
    )


@pytest.fixture
def glyphs() -> Dict[str, str]:
    """Glyph table whose markup reveals which icon was rendered."""
    return {
        "seti:folder": '<path d="folder"/>',
        "seti:default": '<path d="default"/>',
        "seti:license": '<path d="license"/>',
        "seti:markdown": '<path d="markdown"/>',
        "seti:json": '<path d="json"/>',
    }


@pytest.fixture
def directory_label() -> str:
    return "Directory"


@pytest.fixture
def parse() -> Callable[[str], Tag]:
    """Parse a markup fragment the way the engine does and return its container."""
    def _parse(html: str) -> Tag:
        return parse_fragment(html)[1]
    return _parse
