"""Sequences that declare their element type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar, overload

T = TypeVar("T")


class Records(Sequence[T], Generic[T]):
    """An immutable sequence carrying a declared element type.

    A plain list says nothing about what it holds, so marshaling one checks
    every element at run time. `Records` states the element type up front;
    when that type implements `header()` and `record()` the elements are
    trusted and written without per-element checks. An interface element
    type (`object`, `typing.Any`, a `Protocol`) says nothing concrete, so the
    elements are checked as for a plain list.

    Example:
        >>> rows = Records(Person, [alice, bob])
        >>> CSVMarshal.encode(rows)
    """

    __slots__ = ("_items", "element_type")

    def __init__(self, element_type: type[T], items: Iterable[T] = ()) -> None:
        self.element_type = element_type
        self._items: tuple[T, ...] = tuple(items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Records[T]: ...

    def __getitem__(self, index: int | slice) -> T | Records[T]:
        if isinstance(index, slice):
            return Records(self.element_type, self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Records):
            return NotImplemented
        return self.element_type is other.element_type and self._items == other._items

    def __hash__(self) -> int:
        return hash((self.element_type, self._items))

    def __repr__(self) -> str:
        return f"Records({self.element_type.__qualname__}, {list(self._items)!r})"
