"""Environment variable lookups."""

import os
import re
from typing import Optional

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def getenv_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return the environment variable ``name`` or ``default`` if unset."""
    return os.environ.get(name, default)


def to_int(text: str) -> int:
    """Best-effort integer conversion.

    Reads an optional sign and the leading run of decimal digits, ignoring
    anything after them. Text with no leading digits converts to 0.
    """
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def getenv_int(name: str, default: Optional[int] = None) -> Optional[int]:
    """Return the environment variable ``name`` as an int, or ``default`` if unset."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return to_int(raw)
