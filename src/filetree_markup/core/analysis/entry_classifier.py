from __future__ import annotations

"""
Entry Classifier.

Inspects the children of one list item and decides whether it describes a
file, a directory or a placeholder, extracting the display name and the
comment in the process.
"""

import logging
from typing import Optional, Sequence, Tuple

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from filetree_markup.core.analysis.comment_collector import collect_comment, is_sub_tree
from filetree_markup.domain.constants import DIRECTORY_NAME_RX, HIGHLIGHT_TAG, PLACEHOLDER_RX
from filetree_markup.domain.tree_models import Entry

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify_entry(children: Sequence[PageElement]) -> Entry:
    """
    Build the Entry describing a list item from its (whitespace-stripped) children.

    A leading text node is split on its first run of whitespace: the first
    token is the name and the rest opens the comment.

    Args:
        children: Ordered children of the list item.

    Returns:
        Entry: Classification flags, name, comment nodes and remaining children.
    """
    first_child: Optional[PageElement] = children[0] if children else None
    siblings = list(children[1:])

    text_remainder: Optional[str] = None
    if is_text(first_child):
        name, text_remainder = split_name(str(first_child))
        first_child = NavigableString(name)

    comment, remaining = collect_comment(text_remainder, siblings)

    name = render_text(first_child)
    is_placeholder = bool(PLACEHOLDER_RX.match(name))
    is_directory = not is_placeholder and (
        bool(DIRECTORY_NAME_RX.search(name)) or any(is_sub_tree(child) for child in remaining)
    )
    is_highlighted = isinstance(first_child, Tag) and first_child.name == HIGHLIGHT_TAG

    entry = Entry(
        name=name,
        first_child=first_child,
        is_directory=is_directory,
        is_placeholder=is_placeholder,
        is_highlighted=is_highlighted,
        comment=comment,
        children=remaining,
    )
    logger.debug(f"Classified '{name}' as {entry.kind} ({len(comment)} comment node(s))")
    return entry


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def is_text(node: Optional[PageElement]) -> bool:
    """Return True for plain text nodes (markup comments are not text)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def split_name(value: str) -> Tuple[str, Optional[str]]:
    """
    Split 'README.md This is a comment' into ('README.md', 'This is a comment').

    Returns:
        Tuple[str, Optional[str]]: The name and the text after the first run of
        whitespace, or None when nothing but whitespace follows the name.
    """
    parts = value.split(None, 1)
    if not parts:
        return "", None

    remainder = parts[1] if len(parts) > 1 else ""
    return parts[0], remainder if remainder.strip() else None


def render_text(node: Optional[PageElement]) -> str:
    """Return the text content of a node as it would be read on screen."""
    if node is None:
        return ""
    if isinstance(node, Tag):
        return node.get_text()
    if isinstance(node, PreformattedString):
        return ""
    return str(node)
