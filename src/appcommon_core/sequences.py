from __future__ import annotations

from itertools import pairwise
from typing import Any, Callable, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T")


def pairs(items: Iterable[T]) -> Iterator[tuple[T, T]]:
    """Yield each element together with the one that follows it."""
    return pairwise(items)


def for_each_pair(items: Iterable[T], block: Callable[[T, T], Any]) -> None:
    for previous, following in pairwise(items):
        block(previous, following)


def unique(
    items: Iterable[T],
    *,
    key: Callable[[T], Hashable] | None = None,
) -> list[T]:
    """Return `items` without duplicates, keeping the first occurrence.

    `key` projects each element to the value used for comparison, which
    also allows deduplicating unhashable elements.
    """
    seen: set[Hashable] = set()
    result: list[T] = []
    for item in items:
        marker = item if key is None else key(item)
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result
