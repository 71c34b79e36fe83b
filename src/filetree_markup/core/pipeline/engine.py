from __future__ import annotations

"""
File Tree Processing Engine.

Entry point of the transformation: parses the author markup as a fragment,
validates its shape, decorates every list item in a single pass and
serializes the annotated tree back to markup.
"""

import logging
from typing import Mapping, Optional

from filetree_markup.core.analysis.tree_walker import FileTreeDecorator, walk
from filetree_markup.core.pipeline.stages.parser import parse_fragment
from filetree_markup.core.pipeline.stages.validator import (
    FileTreeValidationError,
    validate_file_tree,
)
from filetree_markup.domain.icon_definitions import DEFAULT_DEFINITIONS
from filetree_markup.domain.icons import Icons
from filetree_markup.domain.tree_models import Definitions

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def process_file_tree(
        html: str,
        directory_label: str,
        definitions: Optional[Definitions] = None,
        glyphs: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Process the markup of a file tree into annotated, interactive markup.

    Args:
        html: Inner markup of the file tree (a single <ul>).
        directory_label: Localized screen reader label for directories.
        definitions: Icon name tables. Defaults to the built-in tables.
        glyphs: Icon identifier to SVG markup table. Defaults to the built-in glyphs.

    Returns:
        str: The processed markup.

    Raises:
        FileTreeValidationError: If the markup is not a single non-empty list.
    """
    soup, fragment = parse_fragment(html)

    try:
        validate_file_tree(fragment)
    except FileTreeValidationError as e:
        logger.debug(f"Rejected file tree markup: {e}")
        raise

    decorator = FileTreeDecorator(
        soup,
        definitions if definitions is not None else DEFAULT_DEFINITIONS,
        glyphs if glyphs is not None else Icons,
        directory_label,
    )
    walk(fragment, decorator)

    logger.info(
        "File tree processed: "
        f"{decorator.stats['file']} file(s), "
        f"{decorator.stats['directory']} directory(ies), "
        f"{decorator.stats['placeholder']} placeholder(s)"
    )
    return fragment.decode_contents()
