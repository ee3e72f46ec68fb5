from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")


def unwrap_or_raise(
    value: T | None,
    error: BaseException | Callable[[], BaseException],
) -> T:
    if value is not None:
        return value
    if isinstance(error, BaseException):
        raise error
    raise error()


def unwrap_or(value: T | None, fallback: T) -> T:
    if value is None:
        return fallback
    return value
