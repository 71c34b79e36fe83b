from __future__ import annotations

"""
Tree Walker.

Depth-first, pre-order traversal over element nodes. Every element has its
newline-only text children stripped before it is visited; the visitor then
decides whether the walker descends into the (possibly rebuilt) children or
skips the subtree.
"""

import logging
from collections import Counter
from typing import Callable, List, Mapping

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from filetree_markup.core.analysis.entry_classifier import classify_entry
from filetree_markup.core.analysis.icon_resolver import get_file_icon_name
from filetree_markup.core.analysis.node_builder import NodeBuilder
from filetree_markup.domain.constants import (
    CLASS_DIRECTORY,
    CLASS_EMPTY,
    CLASS_FILE,
    LIST_ITEM_TAG,
    NEWLINES_ONLY_RX,
)
from filetree_markup.domain.tree_models import Definitions, VisitResult

logger = logging.getLogger(__name__)

Visitor = Callable[[Tag], VisitResult]


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def walk(root: Tag, visitor: Visitor) -> None:
    """
    Visit every element under root (root included) in document order.

    Children are read after the visitor returns, so a visitor that replaces
    the children of a node steers the walk into the new children only.

    Args:
        root: Element (or document) to start from.
        visitor: Callable returning VisitResult.DESCEND or VisitResult.SKIP.
    """
    stack: List[Tag] = [root]
    while stack:
        node = stack.pop()
        strip_newline_text(node)

        if visitor(node) is VisitResult.SKIP:
            continue

        stack.extend(reversed([child for child in node.children if isinstance(child, Tag)]))


def strip_newline_text(node: Tag) -> None:
    """Remove direct text children made only of newline characters."""
    for child in list(node.children):
        if _is_newline_text(child):
            child.extract()


def _is_newline_text(node: PageElement) -> bool:
    if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
        return False
    return bool(NEWLINES_ONLY_RX.match(str(node)))


# -----------------------------------------------------------------------------
# FILE TREE DECORATION
# -----------------------------------------------------------------------------

class FileTreeDecorator:
    """
    Visitor rewriting each <li> into a file, directory or placeholder entry.

    Directories are descended into so nested entries are decorated too;
    files are skipped since their remaining children are not tree entries.
    """

    def __init__(
            self,
            soup: BeautifulSoup,
            definitions: Definitions,
            glyphs: Mapping[str, str],
            directory_label: str,
    ):
        self._definitions = definitions
        self._builder = NodeBuilder(soup, glyphs, directory_label)
        self.stats: Counter[str] = Counter()

    def __call__(self, node: Tag) -> VisitResult:
        if node.name != LIST_ITEM_TAG:
            return VisitResult.DESCEND

        children = list(node.children)
        node.clear()
        entry = classify_entry(children)

        icon_name = None
        if not entry.is_directory and not entry.is_placeholder:
            icon_name = get_file_icon_name(entry.name, self._definitions)

        node["class"] = CLASS_DIRECTORY if entry.is_directory else CLASS_FILE
        if entry.is_placeholder:
            node["class"] += f" {CLASS_EMPTY}"

        for child in self._builder.rebuild(entry, icon_name):
            node.append(child)

        self.stats[entry.kind] += 1
        return VisitResult.DESCEND if entry.is_directory else VisitResult.SKIP
