from __future__ import annotations

"""
Unit tests for the Icon Resolver.

Verifies the exact name -> extension -> partial cascade and the
longest-to-shortest extension lookup.
"""

from filetree_markup.core.analysis.icon_resolver import get_file_icon_name, get_icon_from_extension
from filetree_markup.domain.icon_definitions import DEFAULT_DEFINITIONS
from filetree_markup.domain.tree_models import Definitions


def test_exact_file_name_match(definitions: Definitions) -> None:
    assert get_file_icon_name("LICENSE", definitions) == "seti:license"


def test_exact_match_wins_over_extension(definitions: Definitions) -> None:
    """'package.json' is registered by name, so '.json' is never consulted."""
    assert get_file_icon_name("package.json", definitions) == "seti:npm"


def test_extension_match(definitions: Definitions) -> None:
    assert get_file_icon_name("README.md", definitions) == "seti:markdown"


def test_multi_dot_name_falls_back_to_shorter_extension(definitions: Definitions) -> None:
    """No '.lock.json' entry exists, so '.json' is used."""
    assert get_file_icon_name("app.lock.json", definitions) == "seti:json"


def test_longest_extension_tried_first(definitions: Definitions) -> None:
    tables = Definitions(extensions={".ts": "seti:ts-short", ".d.ts": "seti:ts-long"})
    assert get_icon_from_extension("env.d.ts", tables) == "seti:ts-long"
    assert get_icon_from_extension("env.ts", tables) == "seti:ts-short"


def test_extension_requires_a_dot(definitions: Definitions) -> None:
    assert get_icon_from_extension("Makefile", definitions) is None


def test_dotfile_uses_whole_name_as_extension() -> None:
    tables = Definitions(extensions={".env": "seti:config"})
    assert get_file_icon_name(".env", tables) == "seti:config"


def test_partial_match(definitions: Definitions) -> None:
    assert get_file_icon_name("webpack.prod.js", definitions) == "seti:webpack"


def test_first_partial_in_table_order_wins() -> None:
    """Overlapping partials resolve by insertion order, not specificity."""
    tables = Definitions(partials={"config": "seti:config", "vite.config": "seti:vite"})
    assert get_file_icon_name("vite.config.mjs", tables) == "seti:config"

    reordered = Definitions(partials={"vite.config": "seti:vite", "config": "seti:config"})
    assert get_file_icon_name("vite.config.mjs", reordered) == "seti:vite"


def test_no_match_returns_none(definitions: Definitions) -> None:
    assert get_file_icon_name("unknown.zzz", definitions) is None
    assert get_file_icon_name("", definitions) is None


def test_builtin_tables() -> None:
    assert get_file_icon_name("LICENSE", DEFAULT_DEFINITIONS) == "seti:license"
    assert get_file_icon_name("README.md", DEFAULT_DEFINITIONS) == "seti:markdown"
    assert get_file_icon_name("tsconfig.json", DEFAULT_DEFINITIONS) == "seti:tsconfig"
    assert get_file_icon_name("data.config.json", DEFAULT_DEFINITIONS) == "seti:json"
