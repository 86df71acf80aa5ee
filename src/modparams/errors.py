"""Error types for parameter parsing.

Every recoverable failure raised while parsing arguments is a ``ParamError``
carrying an ``ErrorKind`` plus the parameter name and raw value that caused
it. Declaring more parameters than a registry can hold is a programming
error and raises ``RegistryFullError`` instead.
"""

from enum import Enum
from typing import Optional

# errno values reported by the status-code interface
ENOENT = 2
EINVAL = 22
ENOSPC = 28


class ErrorKind(Enum):
    """Closed set of failure kinds."""
    UNKNOWN_PARAMETER = "unknown_parameter"
    INVALID_FORMAT = "invalid_format"
    BUFFER_TOO_SMALL = "buffer_too_small"
    MISSING_VALUE = "missing_value"
    TOO_MANY_ELEMENTS = "too_many_elements"
    TOO_FEW_ELEMENTS = "too_few_elements"
    CAPACITY_EXCEEDED = "capacity_exceeded"

    @property
    def status(self) -> int:
        """Nonzero status code for this kind."""
        if self is ErrorKind.UNKNOWN_PARAMETER:
            return ENOENT
        if self is ErrorKind.BUFFER_TOO_SMALL:
            return ENOSPC
        return EINVAL


class ParamError(ValueError):
    """A parameter could not be set.

    Attributes:
        kind: The failure kind
        name: Parameter name as given on the command line (if known)
        value: Raw value text (None when the token had no ``=value``)
        reason: Short human-readable explanation
    """

    kind: ErrorKind = ErrorKind.INVALID_FORMAT

    def __init__(
        self,
        reason: str = "",
        name: Optional[str] = None,
        value: Optional[str] = None,
    ):
        self.reason = reason
        self.name = name
        self.value = value
        super().__init__(self._message())

    def _message(self) -> str:
        if self.kind is ErrorKind.UNKNOWN_PARAMETER:
            return f"Unknown parameter '{self.name}'"
        shown = self.value if self.value is not None else ""
        if self.kind is ErrorKind.BUFFER_TOO_SMALL and self.name is not None:
            message = f"'{shown}' too large for parameter '{self.name}'"
        elif self.name is not None:
            message = f"'{shown}' invalid for parameter '{self.name}'"
        else:
            message = self.kind.value.replace("_", " ")
        if self.reason:
            message = f"{message}: {self.reason}"
        return message

    @property
    def status(self) -> int:
        return self.kind.status

    def with_context(self, name: str, value: Optional[str]) -> "ParamError":
        """Attach the offending parameter name and raw value.

        Context already present is kept, so the innermost site wins.
        """
        if self.name is None:
            self.name = name
        if self.value is None:
            self.value = value
        self.args = (self._message(),)
        return self

    def __str__(self) -> str:
        return self._message()


class UnknownParameterError(ParamError):
    kind = ErrorKind.UNKNOWN_PARAMETER


class InvalidFormatError(ParamError):
    kind = ErrorKind.INVALID_FORMAT


class BufferTooSmallError(ParamError):
    kind = ErrorKind.BUFFER_TOO_SMALL


class MissingValueError(ParamError):
    kind = ErrorKind.MISSING_VALUE


class TooManyElementsError(ParamError):
    kind = ErrorKind.TOO_MANY_ELEMENTS


class TooFewElementsError(ParamError):
    kind = ErrorKind.TOO_FEW_ELEMENTS


class RegistryFullError(AssertionError):
    """Raised when declaring past a registry's fixed capacity."""

    kind = ErrorKind.CAPACITY_EXCEEDED
