from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional


def _reverse(value: str) -> str:
    return value[::-1]


class Type:
    """Base runtime type descriptor."""

    name: str = "type"

    @property
    def python_type(self) -> Optional[type]:
        return None

    @property
    def operations(self) -> Dict[str, Callable[..., Any]]:
        return {}

    def accepts(self, value: Any) -> bool:
        py = self.python_type
        return py is not None and type(value) is py

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.__class__.__name__


@dataclass(frozen=True)
class UnknownType(Type):
    name: str = "unknown"


@dataclass(frozen=True)
class IntType(Type):
    name: str = "int"

    @property
    def python_type(self) -> type:
        return int


@dataclass(frozen=True)
class FloatType(Type):
    name: str = "float"

    @property
    def python_type(self) -> type:
        return float


@dataclass(frozen=True)
class BoolType(Type):
    name: str = "bool"

    @property
    def python_type(self) -> type:
        return bool


@dataclass(frozen=True)
class StringType(Type):
    name: str = "str"

    @property
    def python_type(self) -> type:
        return str

    @property
    def operations(self) -> Dict[str, Callable[..., Any]]:
        # Unbound methods: invoking them on a non-str raises TypeError.
        return {"length": str.__len__, "reverse": _reverse}


def type_of(value: Any) -> Type:
    """Return the descriptor for the concrete type of a runtime value."""
    # bool is a subclass of int, so it goes first.
    if isinstance(value, bool):
        return BoolType()
    if isinstance(value, int):
        return IntType()
    if isinstance(value, float):
        return FloatType()
    if isinstance(value, str):
        return StringType()
    return UnknownType(name=type(value).__name__)
