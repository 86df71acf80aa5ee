"""Argument string tokenizer.

Splits a string such as ``foo=bar,bar2 baz=fuz wiz`` into ``(name, value)``
pairs. Double quotes protect whitespace (``wiz="a b c"``) but cannot
themselves be escaped. Tokens without ``=`` yield a value of None.

The input string is never modified; each step returns the position of the
next token so the same text can be scanned any number of times.
"""

from typing import Iterator, Optional, Tuple

_WHITESPACE = " \t\n\v\f\r"


def skip_spaces(text: str, pos: int = 0) -> int:
    """Return the index of the first non-whitespace character at or after pos."""
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def next_arg(text: str, pos: int = 0) -> Tuple[str, Optional[str], int]:
    """Extract the token starting at ``pos``.

    ``pos`` must point at a non-whitespace character.

    Rules:
        - a token beginning with ``"`` starts in quoted mode
        - every ``"`` toggles quoting; unquoted whitespace ends the token
        - the name ends at the first ``=`` in the token that is not its
          first character
        - a value starting with ``"`` loses that quote, and the token's
          closing quote if it has one
        - a token that began quoted loses its closing quote

    Args:
        text: Full argument string
        pos: Start of the token

    Returns:
        Tuple of (name, value or None, start of the following token)
    """
    quoted = text.startswith('"', pos)
    if quoted:
        pos += 1
    in_quote = quoted

    equals = None
    end = pos
    while end < len(text):
        ch = text[end]
        if ch in _WHITESPACE and not in_quote:
            break
        # An "=" as the first character is part of the name
        if equals is None and ch == "=" and end > pos:
            equals = end
        if ch == '"':
            in_quote = not in_quote
        end += 1

    token_closed = end > pos and text[end - 1] == '"'

    if equals is None:
        name_end = end - 1 if quoted and token_closed else end
        name, value = text[pos:name_end], None
    else:
        name = text[pos:equals]
        value_start, value_end = equals + 1, end
        if text.startswith('"', value_start):
            value_start += 1
            if token_closed:
                value_end -= 1
        elif quoted and token_closed:
            value_end -= 1
        value = text[value_start:max(value_start, value_end)]

    # Step over the terminating whitespace and any that follows
    return name, value, skip_spaces(text, end)


def iter_args(text: str) -> Iterator[Tuple[str, Optional[str]]]:
    """Lazily yield every ``(name, value)`` pair in ``text``."""
    pos = skip_spaces(text)
    while pos < len(text):
        name, value, pos = next_arg(text, pos)
        yield name, value


def normalize_name(name: str) -> str:
    """Map hyphens to underscores."""
    return name.replace("-", "_")


def names_match(given: str, registered: str) -> bool:
    """Compare a command-line name with a registered one.

    Hyphens in ``given`` count as underscores; ``registered`` is compared
    as-is and case matters.
    """
    return normalize_name(given) == registered
