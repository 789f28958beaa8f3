from __future__ import annotations

import logging
from typing import Any, Generic, Iterator, List, TypeVar

from erasure.errors import BypassUnavailable, ElementRejected, TypeMismatch
from erasure.types import Type, type_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnsafeHandle:
    """Direct write access to a sequence's storage.

    Nothing written through the handle is checked against the declared
    element type, and nothing is reported when the declared type is violated.
    """

    def __init__(self, storage: List[Any]):
        self._storage = storage

    def append(self, value: Any) -> None:
        logger.debug("unsafe append of %r at index %d", value, len(self._storage))
        self._storage.append(value)


class TypedSequence(Generic[T]):
    """Ordered sequence declared to hold values of a single type.

    The declared type is only consulted by ``append`` and ``cast``. The
    storage itself is a plain list of opaque objects.
    """

    def __init__(self, element_type: Type, allow_unsafe: bool = True):
        self.element_type = element_type
        self.allow_unsafe = allow_unsafe
        self._items: List[Any] = []

    def append(self, value: T) -> None:
        if not self.element_type.accepts(value):
            raise ElementRejected(
                value,
                actual=type_of(value),
                expected=self.element_type,
                index=len(self._items),
            )
        logger.debug("append %r at index %d", value, len(self._items))
        self._items.append(value)

    def unsafe_handle(self) -> UnsafeHandle:
        if not self.allow_unsafe:
            raise BypassUnavailable(
                f"unsafe access to sequence of '{self.element_type}' is disabled"
            )
        return UnsafeHandle(self._items)

    def get(self, index: int) -> Any:
        return self._items[index]

    def cast(self, index: int, operation: str) -> T:
        """Read the element at ``index`` as the declared type for ``operation``."""
        value = self._items[index]
        if not self.element_type.accepts(value):
            raise TypeMismatch(
                operation,
                value,
                actual=type_of(value),
                expected=self.element_type,
                index=index,
            )
        return value

    def types(self) -> List[Type]:
        return [type_of(v) for v in self._items]

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"TypedSequence[{self.element_type}]({self._items!r})"
