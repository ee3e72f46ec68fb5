from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, Sequence, TypeVar

from appcommon_locale.tags import LanguageTag

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MatchMode(str, Enum):
    EXACT = "exact"
    ALLOW_PARTIALLY_MATCHING = "allow_partially_matching"


def _normalize_preferred(preferred: str | Sequence[str]) -> list[str]:
    if isinstance(preferred, str):
        return [preferred]
    return list(preferred)


def _match_single(
    candidates: list[tuple[T, LanguageTag]],
    preferred: LanguageTag,
    mode: MatchMode,
) -> T | None:
    for element, tag in candidates:
        if tag == preferred:
            return element

    if mode is MatchMode.EXACT:
        return None

    same_language = [
        (element, tag) for element, tag in candidates if tag.language == preferred.language
    ]
    if not same_language:
        return None
    for element, tag in same_language:
        if tag.is_general:
            return element
    return same_language[0][0]


def best_match(
    available: Iterable[T],
    preferred: str | Sequence[str],
    *,
    mode: MatchMode = MatchMode.EXACT,
    key: Callable[[T], str] | None = None,
) -> T | None:
    """Pick the element whose language tag best fits the preferred language(s).

    An exact language and region match always wins. With
    `ALLOW_PARTIALLY_MATCHING` a tag of the same language is accepted too,
    where a tag without region is considered more general and goes before
    regional siblings. Several preferred identifiers are tried in priority
    order under the same mode. Ties go to the first element in `available`.
    """
    candidates = [
        (element, LanguageTag.parse(key(element) if key is not None else str(element)))
        for element in available
    ]
    for identifier in _normalize_preferred(preferred):
        found = _match_single(candidates, LanguageTag.parse(identifier), mode)
        if found is not None:
            return found
    logger.debug("no %s language match for %s", mode.value, preferred)
    return None


def best_matching_language(
    available: Iterable[str],
    preferred: str | Sequence[str],
    *,
    mode: MatchMode = MatchMode.EXACT,
) -> str | None:
    return best_match(available, preferred, mode=mode)
