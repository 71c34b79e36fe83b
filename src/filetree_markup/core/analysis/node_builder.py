from __future__ import annotations

"""
Node Rebuilder.

Constructs the replacement markup for a classified list item: the icon, the
name, the optional comment and, for directories, the disclosure widget
wrapping the nested list.
"""

from typing import Dict, List, Mapping, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, Tag

from filetree_markup.domain.constants import (
    CLASS_COMMENT,
    CLASS_HIGHLIGHT,
    CLASS_SR_ONLY,
    CLASS_TREE_ENTRY,
    DEFAULT_FILE_ICON,
    FOLDER_ICON,
    LIST_ITEM_TAG,
    LIST_TAG,
    PLACEHOLDER_TEXT,
    SVG_ATTRIBUTES,
)
from filetree_markup.domain.tree_models import Entry


class NodeBuilder:
    """
    Factory for the markup emitted around each file tree entry.

    Holds the document used to create new tags, the glyph table and the
    localized directory label shared by every entry of one transformation.
    """

    def __init__(self, soup: BeautifulSoup, glyphs: Mapping[str, str], directory_label: str):
        self._soup = soup
        self._glyphs = glyphs
        self._directory_label = directory_label

    # -------------------------------------------------------------------------
    # ENTRY ASSEMBLY
    # -------------------------------------------------------------------------

    def rebuild(self, entry: Entry, icon_name: Optional[str] = None) -> List[PageElement]:
        """
        Return the new children of the list item described by the entry.

        Args:
            entry: Classification result for the list item.
            icon_name: Resolved file icon identifier, None for the default icon.

        Returns:
            List[PageElement]: Nodes replacing the original list item children.
        """
        tree_entry = self.make_tree_entry(entry, icon_name)

        if not entry.is_directory:
            return [tree_entry, *entry.children]

        details = self._tag("details", {"open": ""})
        summary = self._tag("summary")
        summary.append(tree_entry)
        details.append(summary)

        if entry.children:
            for child in entry.children:
                details.append(child)
        else:
            details.append(self.make_placeholder_list())

        return [details]

    def make_tree_entry(self, entry: Entry, icon_name: Optional[str] = None) -> Tag:
        """Wrap icon and name (plus any comment) in the tree entry span."""
        attrs: Dict[str, str] = {"class": CLASS_HIGHLIGHT} if entry.is_highlighted else {}
        name_span = self._tag("span", attrs)
        if not entry.is_placeholder:
            name_span.append(self.make_icon(entry, icon_name))
        if entry.first_child is not None:
            name_span.append(entry.first_child)

        tree_entry = self._tag("span", {"class": CLASS_TREE_ENTRY})
        tree_entry.append(name_span)

        if entry.comment and not entry.is_placeholder:
            comment_span = self._tag("span", {"class": CLASS_COMMENT})
            for node in entry.comment:
                comment_span.append(node)
            tree_entry.append(NavigableString(" "))
            tree_entry.append(comment_span)

        return tree_entry

    # -------------------------------------------------------------------------
    # ICONS
    # -------------------------------------------------------------------------

    def make_icon(self, entry: Entry, icon_name: Optional[str] = None) -> Tag:
        """
        Build the icon span for an entry.

        Directories get the folder glyph preceded by a screen reader only
        label so the entry is announced as a directory before its name.
        """
        icon = self._tag("span")
        if entry.is_directory:
            label = self._tag("span", {"class": CLASS_SR_ONLY})
            label.string = self._directory_label
            icon.append(label)
            icon.append(self.make_svg_icon(FOLDER_ICON))
        else:
            icon.append(self.make_svg_icon(icon_name or DEFAULT_FILE_ICON))
        return icon

    def make_svg_icon(self, icon_name: str) -> Tag:
        """Create an <svg> element from the glyph registered for icon_name."""
        glyph = self._glyphs.get(icon_name)
        if glyph is None:
            glyph = self._glyphs.get(DEFAULT_FILE_ICON, "")

        svg = self._tag("svg", dict(SVG_ATTRIBUTES))
        fragment = BeautifulSoup(glyph, "html.parser")
        for child in list(fragment.contents):
            svg.append(child.extract())
        return svg

    def make_placeholder_list(self) -> Tag:
        """Synthesize '<ul><li>…</li></ul>' for a directory without contents."""
        sub_tree = self._tag(LIST_TAG)
        item = self._tag(LIST_ITEM_TAG)
        item.string = PLACEHOLDER_TEXT
        sub_tree.append(item)
        return sub_tree

    # -------------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------------

    def _tag(self, name: str, attrs: Optional[Dict[str, str]] = None) -> Tag:
        return self._soup.new_tag(name, attrs=attrs or {})
