"""
Localization: catalog-backed string lookup.
"""

from .translator import (
    LOCALES_DIR,
    StringLookup,
    Translator,
    available_locales,
    load_catalog,
)

__all__ = [
    'LOCALES_DIR',
    'StringLookup',
    'Translator',
    'available_locales',
    'load_catalog',
]
