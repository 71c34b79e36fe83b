from __future__ import annotations

"""
Markup Fragment Parser.

Parses author markup with the HTML5 tree construction rules (implied end
tags, such as an open '<li>' closed by the next one) and exposes the
parsed content as a fragment rooted at the document body.
"""

from typing import Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

PARSER = "html5lib"

# Opening the body first keeps leading comments, whitespace and head-only
# elements (title, meta, style) inside the fragment.
_FRAGMENT_PREFIX = "<body>"


def parse_fragment(html: str) -> Tuple[BeautifulSoup, Tag]:
    """
    Parse a markup fragment.

    Args:
        html: Author markup, without a document wrapper.

    Returns:
        Tuple[BeautifulSoup, Tag]: The owning document (used to create new
        nodes) and the element whose children are the fragment.
    """
    soup = BeautifulSoup(f"{_FRAGMENT_PREFIX}{html}", PARSER)
    return soup, soup.body
