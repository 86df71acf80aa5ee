"""Typed value codecs.

A codec turns the raw value text of one ``name=value`` token into a Python
value (``parse``) and renders a stored value back to text (``render``).
There is one codec per primitive type:

- byte, short, ushort, int, uint, long, ulong: range-bounded integers
- bool: flag style, absent value means True
- invbool: stores the negation of a bool parse
- string: fixed-capacity text, never truncated

Codecs are stateless apart from their configuration; storage lives with the
caller (see ``modparams.storage``).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import BufferTooSmallError, InvalidFormatError, MissingValueError
from .numeric import parse_strict, parse_strict_unsigned


class Codec:
    """Parse-and-render pair for a single value type.

    Subclasses provide ``name`` (the type name) and ``zero`` (the value an
    unset slot holds).
    """

    def parse(self, text: Optional[str]) -> Any:
        raise NotImplementedError

    def render(self, value: Any) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


@dataclass(frozen=True, repr=False)
class IntegerCodec(Codec):
    """Integer codec bounded to a fixed-width C type.

    Attributes:
        name: Type name (e.g. "int", "ulong")
        bits: Width of the type
        signed: Whether negative values are representable
    """
    name: str
    bits: int
    signed: bool

    zero = 0

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def parse(self, text: Optional[str]) -> int:
        if text is None:
            raise InvalidFormatError(f"{self.name} parameter requires a value")
        if self.signed:
            value = parse_strict(text, 0)
        else:
            value = parse_strict_unsigned(text, 0)
        # A value that would change when narrowed to the type is rejected
        if not self.min <= value <= self.max:
            raise InvalidFormatError(
                f"{value} outside {self.name} range [{self.min}, {self.max}]"
            )
        return value

    def render(self, value: int) -> str:
        return str(int(value))


_TRUE_VALUES = ("y", "Y", "1")
_FALSE_VALUES = ("n", "N", "0")


class BoolCodec(Codec):
    """Boolean flag codec.

    An absent value (bare ``name``) sets True. Otherwise the whole value must
    be one of ``y``, ``Y``, ``1`` (True) or ``n``, ``N``, ``0`` (False).
    Renders as ``Y`` or ``N``.
    """

    name = "bool"
    zero = False

    def parse(self, text: Optional[str]) -> bool:
        if text is None:
            return True
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise InvalidFormatError(f"expected one of y/Y/1/n/N/0, got {text!r}")

    def render(self, value: bool) -> str:
        return "Y" if value else "N"


class InvBoolCodec(BoolCodec):
    """Boolean codec that stores the logical negation of its input."""

    name = "invbool"
    zero = True

    def parse(self, text: Optional[str]) -> bool:
        return not super().parse(text)

    def render(self, value: bool) -> str:
        return "N" if value else "Y"


@dataclass(frozen=True, repr=False)
class StringCodec(Codec):
    """Fixed-capacity text codec.

    ``capacity`` counts a terminator slot, so the longest storable text is
    ``capacity - 1`` characters. Longer text is rejected rather than cut.
    """
    capacity: int

    name = "string"
    zero = ""

    def __post_init__(self):
        if self.capacity <= 0:
            raise ValueError(f"String capacity must be positive, got {self.capacity}")

    def parse(self, text: Optional[str]) -> str:
        if text is None:
            raise MissingValueError("missing param set value")
        if len(text) + 1 > self.capacity:
            raise BufferTooSmallError(
                f"string doesn't fit in {self.capacity - 1} chars"
            )
        return text

    def render(self, value: str) -> str:
        return value


BYTE = IntegerCodec("byte", 8, signed=False)
SHORT = IntegerCodec("short", 16, signed=True)
USHORT = IntegerCodec("ushort", 16, signed=False)
INT = IntegerCodec("int", 32, signed=True)
UINT = IntegerCodec("uint", 32, signed=False)
LONG = IntegerCodec("long", 64, signed=True)
ULONG = IntegerCodec("ulong", 64, signed=False)
BOOL = BoolCodec()
INVBOOL = InvBoolCodec()

_SCALAR_CODECS: Dict[str, Codec] = {
    codec.name: codec
    for codec in (BYTE, SHORT, USHORT, INT, UINT, LONG, ULONG, BOOL, INVBOOL)
}


def scalar_types():
    """Names accepted by ``codec_for``, in declaration order."""
    return list(_SCALAR_CODECS)


def codec_for(type_name: str) -> Codec:
    """Look up the scalar codec for a type name.

    Raises:
        KeyError: If the type name is unknown
    """
    if type_name not in _SCALAR_CODECS:
        raise KeyError(
            f"Unknown parameter type: {type_name}. Available: {scalar_types()}"
        )
    return _SCALAR_CODECS[type_name]
