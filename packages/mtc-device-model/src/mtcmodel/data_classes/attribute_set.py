from collections.abc import Iterator, Mapping
from typing import Any


class AttributeSet(Mapping[str, str]):
    """Read-only, insertion-ordered view of an entity's public attributes.

    Keys that were never set are absent; an AttributeSet never holds an empty
    placeholder for them.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items) if items else {}

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        if isinstance(other, Mapping):
            return self._items == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        return f"AttributeSet({self._items!r})"

    def to_dict(self) -> dict[str, str]:
        return dict(self._items)
