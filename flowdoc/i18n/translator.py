"""
String Lookup - locale catalogs for document labels

Catalogs are flat JSON objects (key -> text) under locales/<locale>.json.
Placeholders use str.format syntax: "{count} days".

A missing key resolves to the key itself and is logged, so a document
still renders with an incomplete catalog.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from config.constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"


class StringLookup(Protocol):
    """Anything that maps a key (+ params) to display text."""

    def translate(self, key: str, **params: Any) -> str:
        ...


def available_locales(locales_dir: Optional[Path] = None) -> List[str]:
    """Locale codes with a catalog file, sorted."""
    directory = locales_dir or LOCALES_DIR
    return sorted(p.stem for p in directory.glob("*.json"))


def load_catalog(locale: str, locales_dir: Optional[Path] = None) -> Dict[str, str]:
    """
    Load the catalog for a locale.

    Raises:
        FileNotFoundError: If the locale has no catalog
        json.JSONDecodeError: If the catalog is not valid JSON
    """
    path = (locales_dir or LOCALES_DIR) / f"{locale}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class Translator:
    """
    Catalog-backed StringLookup for one locale.

    Usage:
        t = Translator("ja")
        t.translate("HEADER_ACTIONS")
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: Optional[Path] = None):
        self.locales_dir = locales_dir or LOCALES_DIR
        if locale not in available_locales(self.locales_dir):
            logger.warning(f"No catalog for locale '{locale}', falling back to '{DEFAULT_LOCALE}'")
            locale = DEFAULT_LOCALE
        self.locale = locale
        self.catalog = load_catalog(locale, self.locales_dir)
        self._missing: set = set()
        logger.debug(f"Translator ready: locale={locale}, {len(self.catalog)} keys")

    def translate(self, key: str, **params: Any) -> str:
        text = self.catalog.get(key)
        if text is None:
            if key not in self._missing:
                self._missing.add(key)
                logger.warning(f"Missing translation: [{self.locale}] {key}")
            return key
        return text.format(**params) if params else text

    @property
    def missing_keys(self) -> List[str]:
        """Keys requested but absent from the catalog, sorted."""
        return sorted(self._missing)

    def __repr__(self) -> str:
        return f"Translator(locale={self.locale}, keys={len(self.catalog)})"
