from __future__ import annotations

"""
File Tree Data Models.

Provides the transient classification record produced for each list item,
the immutable icon lookup tables, and the traversal signal returned by
node visitors.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from bs4.element import PageElement

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

@dataclass
class Entry:
    """
    Classification result for a single file tree list item.

    Attributes:
        name: Rendered text of the first child (the display name).
        first_child: The original first child node, re-parented under the name span.
        is_directory: Name ends with '/' or a nested list follows it.
        is_placeholder: Name is exactly '...' or '…'.
        is_highlighted: First child is a <strong> element.
        comment: Ordered comment nodes attached to the entry.
        children: Remaining siblings, starting at the first nested list if any.
    """
    name: str
    first_child: Optional[PageElement] = None
    is_directory: bool = False
    is_placeholder: bool = False
    is_highlighted: bool = False
    comment: List[PageElement] = field(default_factory=list)
    children: List[PageElement] = field(default_factory=list)

    @property
    def kind(self) -> str:
        if self.is_placeholder:
            return "placeholder"
        return "directory" if self.is_directory else "file"


# -----------------------------------------------------------------------------
# ICON TABLES
# -----------------------------------------------------------------------------

def _frozen(mapping: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Definitions:
    """
    Immutable name/extension/partial -> icon identifier tables.

    Attributes:
        files: Exact file name lookups (e.g. 'LICENSE').
        extensions: Dot-prefixed suffix lookups (e.g. '.md', '.config.json').
        partials: Substring lookups, matched in insertion order.
    """
    files: Mapping[str, str] = field(default_factory=dict)
    extensions: Mapping[str, str] = field(default_factory=dict)
    partials: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", _frozen(self.files))
        object.__setattr__(self, "extensions", _frozen(self.extensions))
        object.__setattr__(self, "partials", _frozen(self.partials))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Definitions":
        return cls(
            files=data.get("files") or {},
            extensions=data.get("extensions") or {},
            partials=data.get("partials") or {},
        )

    def merged(self, other: "Definitions") -> "Definitions":
        """Overlay another table set on top of this one."""
        return Definitions(
            files={**self.files, **other.files},
            extensions={**self.extensions, **other.extensions},
            partials={**self.partials, **other.partials},
        )


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

class VisitResult(Enum):
    """Signal returned by a visitor to steer the tree walker."""
    DESCEND = "descend"
    SKIP = "skip"
