from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from erasure.errors import ConfigError, InvalidOperation, LabStateError
from erasure.sequence import TypedSequence, UnsafeHandle
from erasure.types import StringType, type_of

logger = logging.getLogger(__name__)

OPAQUE_HEADER = "The Strings collection value is: "
REVERSED_HEADER = "The Strings collection with values in reverse order is: "


@dataclass(frozen=True)
class LabConfig:
    declared_values: Tuple[str, ...] = (
        "string value 1",
        "string value 2",
        "string value 3",
        "string value 4",
        "string value 5",
    )
    foreign_value: Any = 5
    # Number of declared values appended before the foreign one.
    foreign_index: int = 3
    allow_unsafe: bool = True

    def __post_init__(self):
        if not 0 <= self.foreign_index <= len(self.declared_values):
            raise ConfigError(
                f"foreign_index must be between 0 and {len(self.declared_values)}, "
                f"got {self.foreign_index}"
            )


def format_listing(header: str, values: Iterable[Any]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{header}[{quoted}]"


class HeterogeneousSequenceLab:
    """Owns a sequence of strings and breaks it on purpose.

    ``initialize`` fills the sequence through the checked path and slips
    one foreign value in through the unsafe handle. The read operations
    then show how that value surfaces later: not at all when elements are
    treated as opaque, as ``TypeMismatch`` when they are cast to ``str``,
    and as ``InvalidOperation`` when a ``str`` operation is invoked on it.
    """

    def __init__(self, config: Optional[LabConfig] = None):
        self.config = config or LabConfig()
        self.sequence: TypedSequence[str] = TypedSequence(
            StringType(), allow_unsafe=self.config.allow_unsafe
        )
        self.initialized = False

    def initialize(self) -> None:
        if self.initialized:
            raise LabStateError("lab is already initialized")
        # Acquired before any append so a refused handle leaves the sequence empty.
        handle = self.sequence.unsafe_handle()
        split = self.config.foreign_index
        for value in self.config.declared_values[:split]:
            self.sequence.append(value)
        self.insert_foreign_element(handle)
        for value in self.config.declared_values[split:]:
            self.sequence.append(value)
        self.initialized = True

    def insert_foreign_element(self, handle: Optional[UnsafeHandle] = None) -> None:
        if handle is None:
            handle = self.sequence.unsafe_handle()
        handle.append(self.config.foreign_value)
        logger.debug(
            "sequence of '%s' now holds a '%s'",
            self.sequence.element_type,
            type_of(self.config.foreign_value),
        )

    def _require_initialized(self) -> None:
        if not self.initialized:
            raise LabStateError("initialize() must be called before reading the lab")

    def format_opaque(self) -> str:
        self._require_initialized()
        return format_listing(OPAQUE_HEADER, (str(v) for v in self.sequence))

    def format_assuming_declared(self) -> str:
        self._require_initialized()
        reverse = self.sequence.element_type.operations["reverse"]
        reversed_values = []
        for index in range(len(self.sequence)):
            value = self.sequence.cast(index, "reverse")
            reversed_values.append(reverse(value))
            logger.debug("reversed index %d: %r", index, reversed_values[-1])
        return format_listing(REVERSED_HEADER, reversed_values)

    def element_length(self, index: int) -> int:
        self._require_initialized()
        value = self.sequence.get(index)
        length = self.sequence.element_type.operations["length"]
        try:
            return length(value)
        except TypeError as exc:
            raise InvalidOperation(
                "length",
                value,
                actual=type_of(value),
                expected=self.sequence.element_type,
                index=index,
            ) from exc

    def attempt_invalid_operation(self, index: Optional[int] = None) -> str:
        if index is None:
            index = self.config.foreign_index
        result = self.element_length(index)
        return f"Invoked 'length' on '{self.sequence.get(index)}' and got {result}"
