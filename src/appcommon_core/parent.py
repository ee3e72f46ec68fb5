from __future__ import annotations

import logging
import weakref
from typing import Callable, TypeVar

from appcommon_core.errors import ParentUnavailableError

logger = logging.getLogger(__name__)

P = TypeVar("P")
R = TypeVar("R")


def _resolve_parent(parent: P | weakref.ReferenceType[P] | None) -> P | None:
    if isinstance(parent, weakref.ReferenceType):
        return parent()
    return parent


def with_parent(
    parent: P | weakref.ReferenceType[P] | None,
    block: Callable[[P], R],
    *,
    operation: str | None = None,
) -> R:
    """Run `block` with a live parent, failing loudly when it is gone.

    Meant for objects that keep a weak reference to an owner and must not be
    used after the owner has been released.
    """
    resolved = _resolve_parent(parent)
    if resolved is None:
        name = operation or getattr(block, "__qualname__", repr(block))
        message = f"Using {name} on an object without parent"
        logger.error(message)
        raise ParentUnavailableError(message)
    return block(resolved)
