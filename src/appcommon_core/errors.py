from __future__ import annotations

CHAIN_SEPARATOR = " > "


class AppCommonError(Exception):
    pass


class ParentUnavailableError(AssertionError, AppCommonError):
    """Raised when an operation needs a parent object that is already gone."""


def _describe_single(exc: BaseException) -> str:
    name = type(exc).__name__
    message = str(exc).strip()
    if not message:
        return name
    return f"{message} ({name})"


def _next_in_chain(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def describe_error(error: object) -> str:
    """Readable one-line description of an error and the errors behind it.

    `RuntimeError("save failed")` raised from `OSError("disk full")` reads as
    `save failed (RuntimeError) > disk full (OSError)`.
    """
    if not isinstance(error, BaseException):
        return str(error)

    parts: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        parts.append(_describe_single(current))
        current = _next_in_chain(current)
    return CHAIN_SEPARATOR.join(parts)
