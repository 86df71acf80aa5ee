"""Strict integer parsing.

Converts text to an integer only if the whole string is a number: any
unconsumed trailing content is rejected, with the single exception of one
trailing newline (values echoed from files and shells usually carry one).
Base handling follows C ``strtoul``:

- base 0 picks hex for a ``0x``/``0X`` prefix, octal for a leading ``0``,
  decimal otherwise
- base 16 accepts an optional ``0x`` prefix
- any base from 2 to 36 is allowed

Results are plain Python ints with no range limit; callers range-check.
"""

import string

from .errors import InvalidFormatError

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = string.digits + string.ascii_lowercase


def _digit_value(ch: str) -> int:
    idx = _DIGITS.find(ch.lower())
    return idx if idx >= 0 else 99


def _scan_digits(text: str, pos: int, base: int):
    """Accumulate digits valid in ``base`` starting at ``pos``.

    Returns:
        Tuple of (value, end position, number of digits consumed)
    """
    value = 0
    start = pos
    while pos < len(text):
        digit = _digit_value(text[pos])
        if digit >= base:
            break
        value = value * base + digit
        pos += 1
    return value, pos, pos - start


def _has_hex_prefix(text: str, pos: int) -> bool:
    return (
        text[pos:pos + 1] == "0"
        and text[pos + 1:pos + 2] in ("x", "X")
        and _digit_value(text[pos + 2:pos + 3] or "?") < 16
    )


def _scan_unsigned(text: str, pos: int, base: int):
    if base == 0:
        if _has_hex_prefix(text, pos):
            return _scan_digits(text, pos + 2, 16)
        if text[pos:pos + 1] == "0":
            return _scan_digits(text, pos, 8)
        return _scan_digits(text, pos, 10)
    if base == 16 and _has_hex_prefix(text, pos):
        return _scan_digits(text, pos + 2, 16)
    return _scan_digits(text, pos, base)


def _check_base(base: int) -> None:
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"Unsupported numeric base {base}; use 0 or 2-36")


def _finish(text: str, end: int, value: int) -> int:
    # Entire input consumed, or exactly one trailing newline left
    if end == len(text) or (end == len(text) - 1 and text[end] == "\n"):
        return value
    raise InvalidFormatError(f"trailing characters after number in {text!r}")


def parse_strict_unsigned(text: str, base: int = 0) -> int:
    """Parse an unsigned integer, rejecting trailing garbage.

    Args:
        text: Input text
        base: Numeric base (0 for prefix auto-detection, or 2-36)

    Returns:
        The parsed non-negative integer

    Raises:
        InvalidFormatError: Empty input, no digits, a minus sign, or
            trailing content other than a single newline
        ValueError: Unsupported base
    """
    _check_base(base)
    if not text:
        raise InvalidFormatError("empty number")

    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    if text[pos:pos + 1] == "+":
        pos += 1

    value, end, count = _scan_unsigned(text, pos, base)
    if count == 0:
        raise InvalidFormatError(f"no digits in {text!r}")
    return _finish(text, end, value)


def parse_strict(text: str, base: int = 0) -> int:
    """Parse a signed integer, rejecting trailing garbage.

    A single leading ``-`` negates the unsigned parse of the remainder.

    >>> parse_strict("-42")
    -42
    >>> parse_strict("0x10\\n")
    16
    """
    if text.startswith("-"):
        return -parse_strict_unsigned(text[1:], base)
    return parse_strict_unsigned(text, base)
