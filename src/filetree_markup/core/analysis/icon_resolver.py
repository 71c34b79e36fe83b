from __future__ import annotations

"""
Icon Resolver.

Resolves a file name to an icon identifier through a three-step cascade:
exact file name, extension suffix (longest to shortest), then substring
partials in table order. Returns None when nothing matches so the caller
can fall back to the default file icon.
"""

import logging
from typing import Optional

from filetree_markup.domain.tree_models import Definitions

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_file_icon_name(file_name: str, definitions: Definitions) -> Optional[str]:
    """
    Return the icon identifier for a file name, or None if no table matches.

    Args:
        file_name: Display name of the file (e.g. 'README.md').
        definitions: Icon lookup tables.

    Returns:
        Optional[str]: Icon identifier such as 'seti:markdown'.
    """
    icon = definitions.files.get(file_name)
    if icon:
        return icon

    icon = get_icon_from_extension(file_name, definitions)
    if icon:
        return icon

    # First partial in table order wins, no specificity ranking
    for partial, partial_icon in definitions.partials.items():
        if partial in file_name:
            logger.debug(f"Icon for '{file_name}' resolved by partial '{partial}'")
            return partial_icon

    return None


def get_icon_from_extension(file_name: str, definitions: Definitions) -> Optional[str]:
    """
    Look up an icon by extension, trying the longest suffix first.

    Everything after the first dot counts as the extension, so
    'name.with.dots' tries '.with.dots' and then '.dots'.
    """
    first_dot = file_name.find(".")
    if first_dot == -1:
        return None

    extension = file_name[first_dot:]
    while extension:
        icon = definitions.extensions.get(extension)
        if icon:
            return icon

        next_dot = extension.find(".", 1)
        if next_dot == -1:
            return None
        extension = extension[next_dot:]

    return None
