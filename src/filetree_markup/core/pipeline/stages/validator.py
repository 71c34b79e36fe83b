from __future__ import annotations

"""
File Tree Structure Validator.

Gatekeeper run before any rewriting: the author markup must be exactly one
unordered list holding at least one list item. Validation only reads the
tree; the first defect found aborts the transformation.
"""

import logging
from typing import List

from bs4.element import Tag

from filetree_markup.domain.constants import LIST_ITEM_TAG, LIST_TAG

logger = logging.getLogger(__name__)

_PREFIX = "The file tree expects its content to be"


class FileTreeValidationError(ValueError):
    """Raised when the markup of a file tree does not have the expected shape."""


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_file_tree(tree: Tag) -> None:
    """
    Check that the parsed markup is a single list with at least one item.

    Args:
        tree: Element whose children are the parsed fragment.

    Raises:
        FileTreeValidationError: Describing the first structural defect found.
    """
    root_elements: List[Tag] = [child for child in tree.children if isinstance(child, Tag)]

    if not root_elements:
        _fail(f"{_PREFIX} a single unordered list but found no child elements.")

    if len(root_elements) != 1:
        tags = " - ".join(f"`<{element.name}>`" for element in root_elements)
        _fail(f"{_PREFIX} a single unordered list but found multiple child elements: {tags}.")

    root_element = root_elements[0]
    if root_element.name != LIST_TAG:
        _fail(
            f"{_PREFIX} an unordered list but found the following element: "
            f"`<{root_element.name}>`."
        )

    if root_element.find(LIST_ITEM_TAG) is None:
        _fail(f"{_PREFIX} an unordered list with at least one list item.")


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _fail(message: str) -> None:
    logger.debug(f"File tree validation failed: {message}")
    raise FileTreeValidationError(message)
