from __future__ import annotations

from typing import Any, Iterable


def build_list(*parts: Any) -> list[Any]:
    """Concatenate items and sub-lists in argument order.

    Lists and tuples are spliced in, `None` stands for a branch that produced
    nothing and any other value is a single item:

        widgets = build_list(
            profile,
            avatar_widget if show_avatar else None,
            [admin_panel, developer_panel] if is_admin else [developer_panel],
        )
    """
    result: list[Any] = []
    for part in parts:
        if part is None:
            continue
        if isinstance(part, (list, tuple)):
            result.extend(part)
            continue
        result.append(part)
    return result


class ListBuilder:
    """Accumulates a list step by step so it can be assigned once."""

    def __init__(self, initial: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(initial)

    def add(self, *parts: Any) -> ListBuilder:
        self._items.extend(build_list(*parts))
        return self

    def extend(self, items: Iterable[Any]) -> ListBuilder:
        self._items.extend(items)
        return self

    def add_if(self, condition: bool, *parts: Any) -> ListBuilder:
        if condition:
            self.add(*parts)
        return self

    def build(self) -> list[Any]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
