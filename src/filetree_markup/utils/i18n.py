from __future__ import annotations

"""
Internationalization (i18n) Utility.

Loads JSON locale files and resolves dot-notation keys with optional
variable interpolation. Provides the localized label announced by screen
readers before each directory name.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

DIRECTORY_LABEL_KEY = "filetree.directory_label"


class I18n:
    """
    Resource manager for locale-specific strings.

    Unknown locales fall back to the default locale; unresolved keys are
    returned as-is.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        # Keys missing from partial locale files resolve against the default locale
        self._fallback: Dict[str, Any] = {}
        default_path = os.path.join(self._locales_path, f"{DEFAULT_LOCALE}.json")
        if os.path.exists(default_path):
            try:
                self._fallback = _read_locale_file(default_path)
            except (OSError, json.JSONDecodeError) as e:
                logger.error(f"I18n: Corrupt default locale file {default_path}: {e}")

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Load the translation dictionary of a locale.

        Args:
            locale: ISO identifier such as 'en' or 'es'. Regional variants
                like 'pt-BR' fall back to their base language file.
        """
        for candidate in _locale_candidates(locale):
            file_path = os.path.join(self._locales_path, f"{candidate}.json")
            if not os.path.exists(file_path):
                continue

            try:
                self._translations = _read_locale_file(file_path)
            except (OSError, json.JSONDecodeError) as e:
                logger.error(f"I18n: Corrupt locale file {file_path}: {e}")
                break

            self._locale = candidate
            self.is_loaded = True
            logger.debug(f"I18n: Loaded locale '{candidate}'")
            return

        logger.warning(f"I18n: Locale '{locale}' unavailable, keys will not be translated.")
        self._translations = {}
        self.is_loaded = False

    def t(self, key: str, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier (e.g. 'filetree.directory_label').
            **kwargs: Variables for str.format interpolation.

        Returns:
            str: The translated string, or the key itself when unresolved.
        """
        current_val = _resolve(self._translations, key)
        if current_val is None:
            current_val = _resolve(self._fallback, key)
        if current_val is None:
            return key

        try:
            return current_val.format(**kwargs) if kwargs else current_val
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for '{key}': {e}")
            return current_val


def _resolve(translations: Dict[str, Any], key: str) -> Optional[str]:
    current_val: Any = translations
    for k in key.split("."):
        if not isinstance(current_val, dict):
            return None
        current_val = current_val.get(k)
    return current_val if isinstance(current_val, str) else None


def _read_locale_file(file_path: str) -> Dict[str, Any]:
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data if isinstance(data, dict) else {}


def _locale_candidates(locale: str) -> List[str]:
    candidates = []
    normalized = (locale or DEFAULT_LOCALE).strip().replace("_", "-")
    if normalized:
        candidates.append(normalized)
        base = normalized.split("-")[0].lower()
        if base != normalized:
            candidates.append(base)
    if DEFAULT_LOCALE not in candidates:
        candidates.append(DEFAULT_LOCALE)
    return candidates


def get_directory_label(locale: str = DEFAULT_LOCALE) -> str:
    """Return the localized screen reader label for directories."""
    if locale == i18n.locale:
        return i18n.t(DIRECTORY_LABEL_KEY)
    return I18n(locale).t(DIRECTORY_LABEL_KEY)


# Global instance for application-wide access
i18n = I18n(DEFAULT_LOCALE)
