from __future__ import annotations

"""
Comment Collector.

Gathers the comment attached to a file tree entry. A comment starts with the
text following the name in the first text node and continues across every
sibling node up to the first nested list, since inline markup such as
'<em>important</em>' is parsed into separate siblings.
"""

from typing import List, Optional, Sequence, Tuple

from bs4.element import NavigableString, PageElement, Tag

from filetree_markup.domain.constants import LIST_TAG


def is_sub_tree(node: Optional[PageElement]) -> bool:
    """Return True if the node is a nested list element."""
    return isinstance(node, Tag) and node.name == LIST_TAG


def collect_comment(
        text_remainder: Optional[str],
        siblings: Sequence[PageElement],
) -> Tuple[List[PageElement], List[PageElement]]:
    """
    Split the siblings of a name into comment nodes and remaining children.

    Args:
        text_remainder: Text that followed the name in the first node.
        siblings: Nodes following the first child, in document order.

    Returns:
        Tuple[List[PageElement], List[PageElement]]: The comment nodes and the
        children kept on the entry (starting at the first nested list).
    """
    sub_tree_index = next(
        (i for i, child in enumerate(siblings) if is_sub_tree(child)),
        len(siblings),
    )

    comment_nodes = list(siblings[:sub_tree_index])

    comment: List[PageElement] = []
    if text_remainder and text_remainder.strip():
        # Trailing whitespace separates the text from inline markup that follows
        text = text_remainder.lstrip() if comment_nodes else text_remainder.strip()
        comment.append(NavigableString(text))
    comment.extend(comment_nodes)

    return comment, list(siblings[sub_tree_index:])
