"""Language tag matching and localized string lookup."""

from __future__ import annotations

from appcommon_locale.matching import MatchMode, best_match, best_matching_language
from appcommon_locale.strings import load_translations, localized_string
from appcommon_locale.tags import LanguageTag

__all__ = [
    "LanguageTag",
    "MatchMode",
    "best_match",
    "best_matching_language",
    "load_translations",
    "localized_string",
]
