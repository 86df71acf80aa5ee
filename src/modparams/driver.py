"""Parse driver: feed an argument vector through a registry.

The driver joins argv into one string, tokenizes it and dispatches each
``name=value`` pair to the matching parameter. It stops at the first
failure and raises it with the offending name and raw value attached.
Nothing is printed; callers decide how to report errors.
"""

import logging
from typing import Callable, Optional, Sequence

from .errors import ParamError, UnknownParameterError
from .registry import ParameterRegistry
from .tokenizer import iter_args

logger = logging.getLogger(__name__)

# Called for names the registry does not know. Return False (or raise a
# ParamError) to reject; any other return value accepts the token.
UnknownHandler = Callable[[str, Optional[str]], Optional[bool]]


def _parse_one(
    registry: ParameterRegistry,
    name: str,
    value: Optional[str],
    unknown: Optional[UnknownHandler],
) -> None:
    param = registry.resolve(name)
    if param is not None:
        param.set(value)
        return

    if unknown is not None:
        logger.debug(f"Unknown argument '{name}': calling {unknown!r}")
        if unknown(name, value) is not False:
            return

    logger.debug(f"Unknown parameter '{name}'")
    raise UnknownParameterError(name=name, value=value)


def parse_string(
    registry: ParameterRegistry,
    args: str,
    unknown: Optional[UnknownHandler] = None,
) -> None:
    """Parse a single argument string such as ``"foo=1 bar"``.

    Args:
        registry: Parameters to resolve names against
        args: Whitespace-separated, quote-aware argument string
        unknown: Optional handler for names the registry does not declare

    Raises:
        ParamError: First failure encountered, with ``name`` and ``value`` set
    """
    logger.debug(f"Parsing ARGS: {args}")
    for name, value in iter_args(args):
        try:
            _parse_one(registry, name, value, unknown)
        except ParamError as exc:
            exc.with_context(name, value)
            logger.debug(str(exc))
            raise


def parse_args(
    registry: ParameterRegistry,
    argv: Sequence[str],
    unknown: Optional[UnknownHandler] = None,
) -> None:
    """Parse an argument vector (without the program name).

    Elements are joined with single spaces before tokenizing, so a quoted
    value may span several argv elements.

    Example:
        >>> parse_args(registry, ["test=5", "flag", "nums=1,2,3"])
    """
    parse_string(registry, " ".join(argv), unknown)


def parse_status(
    registry: ParameterRegistry,
    argv: Sequence[str],
    unknown: Optional[UnknownHandler] = None,
) -> int:
    """Like ``parse_args`` but return a status code instead of raising.

    Returns:
        0 on success, otherwise the first error's status (2 for an unknown
        parameter, 28 for a string that does not fit, 22 for anything else)
    """
    try:
        parse_args(registry, argv, unknown)
    except ParamError as exc:
        return exc.status
    return 0
