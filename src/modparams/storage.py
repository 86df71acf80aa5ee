"""Caller-owned storage for parameter values.

A registry never owns the values it sets. Callers create one of these
objects per parameter, hand it to the registry at declaration time and read
the results back from it after parsing:

- ``Ref`` / ``AttrRef``: a single scalar value
- ``StringBuffer``: fixed-capacity text
- ``ArrayBuffer``: fixed-capacity list of scalars with an optional count
"""

from typing import Any, List, Optional, Union

from .codecs import Codec, StringCodec, codec_for
from .errors import MissingValueError, TooFewElementsError, TooManyElementsError


class Ref:
    """Mutable cell holding one value."""

    def __init__(self, value: Any = None):
        self.value = value

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


class AttrRef(Ref):
    """Reference to an attribute of a caller object.

    Lets a registry write straight into a dataclass, namespace or module.

    Example:
        >>> opts = types.SimpleNamespace(verbose=False)
        >>> ref = AttrRef(opts, "verbose")
    """

    def __init__(self, obj: Any, attr: str):
        if not hasattr(obj, attr):
            raise AttributeError(f"{type(obj).__name__} has no attribute '{attr}'")
        self.obj = obj
        self.attr = attr

    @property
    def value(self) -> Any:
        return getattr(self.obj, self.attr)

    @value.setter
    def value(self, value: Any) -> None:
        setattr(self.obj, self.attr, value)

    def __repr__(self) -> str:
        return f"AttrRef({type(self.obj).__name__}.{self.attr})"


class StringBuffer:
    """Fixed-capacity text storage.

    ``capacity`` includes one terminator slot, matching the size of the
    character array it stands in for: a buffer of capacity 10 holds at most
    9 characters.
    """

    def __init__(self, capacity: int, value: str = ""):
        self.codec = StringCodec(capacity)
        if len(value) + 1 > capacity:
            raise ValueError(
                f"Initial value {value!r} does not fit in capacity {capacity}"
            )
        self.value = value

    @property
    def capacity(self) -> int:
        return self.codec.capacity

    def __repr__(self) -> str:
        return f"StringBuffer(capacity={self.capacity}, value={self.value!r})"


class ArrayBuffer:
    """Fixed-capacity list of values parsed from a comma-separated string.

    Attributes:
        codec: Element codec
        max_elements: Number of slots
        min_elements: Fewest elements a successful parse may supply
        elements: The slots, initialised to the codec's zero value
        count: Optional caller reference receiving the number of elements
            actually supplied
    """

    def __init__(
        self,
        element_type: Union[str, Codec],
        max_elements: int,
        min_elements: int = 1,
        count: Optional[Ref] = None,
    ):
        if max_elements < 1:
            raise ValueError(f"Array needs at least one slot, got {max_elements}")
        if not 1 <= min_elements <= max_elements:
            raise ValueError(
                f"min_elements must be in [1, {max_elements}], got {min_elements}"
            )
        self.codec = codec_for(element_type) if isinstance(element_type, str) else element_type
        self.max_elements = max_elements
        self.min_elements = min_elements
        self.elements: List[Any] = [self.codec.zero] * max_elements
        self.count = count

    def values(self) -> List[Any]:
        """Elements currently in use (all slots when no count is tracked)."""
        n = self.count.get() if self.count is not None else self.max_elements
        return self.elements[:n]

    def __len__(self) -> int:
        return len(self.values())

    def __repr__(self) -> str:
        return (
            f"ArrayBuffer({self.codec.name}, max_elements={self.max_elements}, "
            f"values={self.values()!r})"
        )


def set_array(text: Optional[str], buffer: ArrayBuffer) -> None:
    """Parse a comma-separated list into ``buffer``.

    Elements are written in order as they parse. A failure stops immediately
    and is raised unchanged; slots written before it are not rolled back, so
    after any failure the array contents and count must be treated as
    invalid.

    Raises:
        MissingValueError: No value was supplied
        TooManyElementsError: More than ``max_elements`` segments
        TooFewElementsError: Fewer than ``min_elements`` segments
        ParamError: Whatever the element codec raises
    """
    if text is None:
        raise MissingValueError("expects arguments")

    written = 0
    if buffer.count is not None:
        buffer.count.set(0)
    for segment in text.split(","):
        if written == buffer.max_elements:
            raise TooManyElementsError(
                f"can only take {buffer.max_elements} arguments"
            )
        buffer.elements[written] = buffer.codec.parse(segment)
        written += 1
        if buffer.count is not None:
            buffer.count.set(written)

    if written < buffer.min_elements:
        raise TooFewElementsError(
            f"needs at least {buffer.min_elements} arguments"
        )


def get_array(buffer: ArrayBuffer) -> str:
    """Render the elements in use, comma-joined."""
    return ",".join(buffer.codec.render(v) for v in buffer.values())
