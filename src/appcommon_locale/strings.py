from __future__ import annotations

import gettext
import logging
from functools import lru_cache
from typing import Mapping, Sequence

from appcommon_core.config import get_settings
from appcommon_core.text import substitute_variables

logger = logging.getLogger(__name__)


@lru_cache(maxsize=16)
def _load_catalog(
    text_domain: str,
    locale_dir: str | None,
    languages: tuple[str, ...] | None,
) -> gettext.NullTranslations:
    translations = gettext.translation(
        text_domain,
        localedir=locale_dir,
        languages=list(languages) if languages is not None else None,
        fallback=True,
    )
    if type(translations) is gettext.NullTranslations:
        logger.debug("no %s catalog in %s for %s", text_domain, locale_dir, languages)
    return translations


def load_translations(languages: Sequence[str] | None = None) -> gettext.NullTranslations:
    """Catalog for the configured text domain.

    Falls back to identity translations when no catalog is configured or
    none exists for `languages`. Catalogs are cached per domain, directory
    and languages, so a settings change picks up the matching catalog.
    """
    settings = get_settings()
    return _load_catalog(
        settings.text_domain,
        settings.locale_dir,
        tuple(languages) if languages is not None else None,
    )


def reset_translations_cache() -> None:
    _load_catalog.cache_clear()


def localized_string(
    key: str,
    variables: Mapping[str, str] | None = None,
    *,
    translations: gettext.NullTranslations | None = None,
) -> str:
    """Translated `key` with optional `${VAR}` substitutions applied."""
    catalog = translations if translations is not None else load_translations()
    result = catalog.gettext(key)
    if variables is None:
        return result
    return substitute_variables(result, variables)
