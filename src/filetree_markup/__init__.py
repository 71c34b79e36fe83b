from __future__ import annotations

"""Render author-written nested lists as annotated, interactive file trees."""

from filetree_markup.core.pipeline.engine import process_file_tree
from filetree_markup.core.pipeline.stages.validator import FileTreeValidationError
from filetree_markup.domain.tree_models import Definitions

__version__ = "0.1.0"

__all__ = [
    "Definitions",
    "FileTreeValidationError",
    "process_file_tree",
]
