from typing import Any, Optional

from erasure.types import Type


class ErasureError(Exception):
    kind = "ErasureError"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def details(self):
        return []

    def pretty(self):
        lines = [f"❌ {self.kind}: {self.message}"]
        for label, value in self.details():
            lines.append(f"   | {label:<10} {value}")
        return "\n".join(lines)


class TypeSafetyError(ErasureError):
    """A value of the wrong concrete type reached code that assumed the declared type."""

    kind = "TypeSafetyError"

    def __init__(
        self,
        message: str,
        operation: str,
        value: Any,
        actual: Type,
        expected: Type,
        index: Optional[int] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.value = value
        self.actual = actual
        self.expected = expected
        self.index = index

    def details(self):
        rows = [("operation", self.operation)]
        if self.index is not None:
            rows.append(("index", self.index))
        rows.append(("value", repr(self.value)))
        rows.append(("actual", self.actual))
        rows.append(("expected", self.expected))
        return rows


class TypeMismatch(TypeSafetyError):
    kind = "TypeMismatch"

    def __init__(self, operation, value, actual, expected, index=None):
        where = f" at index {index}" if index is not None else ""
        super().__init__(
            f"cannot treat {value!r}{where} as '{expected}' for '{operation}': "
            f"its concrete type is '{actual}'",
            operation=operation,
            value=value,
            actual=actual,
            expected=expected,
            index=index,
        )


class InvalidOperation(TypeSafetyError):
    kind = "InvalidOperation"

    def __init__(self, operation, value, actual, expected, index=None):
        super().__init__(
            f"tried to invoke '{operation}' on {value!r}, but '{operation}' is an "
            f"operation of '{expected}' and is not valid for type '{actual}'",
            operation=operation,
            value=value,
            actual=actual,
            expected=expected,
            index=index,
        )


class SetupError(ErasureError):
    """The demonstration itself is broken; nothing it prints can be trusted."""

    kind = "SetupError"


class BypassUnavailable(SetupError):
    kind = "BypassUnavailable"


class LabStateError(SetupError):
    kind = "LabStateError"


class ElementRejected(ErasureError):
    """The checked ``append`` refused a value of the wrong type."""

    kind = "ElementRejected"

    def __init__(self, value, actual, expected, index=None):
        super().__init__(
            f"sequence of '{expected}' does not accept {value!r} of type '{actual}'"
        )
        self.value = value
        self.actual = actual
        self.expected = expected
        self.index = index

    def details(self):
        return [
            ("index", self.index),
            ("value", repr(self.value)),
            ("actual", self.actual),
            ("expected", self.expected),
        ]


class ConfigError(SetupError):
    kind = "ConfigError"
