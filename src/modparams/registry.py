"""Parameter descriptors and the fixed-capacity registry that holds them.

Each descriptor binds a name to exactly one storage variant:

- ``Scalar``: a scalar codec writing into a caller ``Ref``
- ``FixedString``: a caller ``StringBuffer``
- ``Array``: a caller ``ArrayBuffer``

The variant is chosen at declaration and never changes. ``set`` and ``get``
dispatch on it.
"""

import logging
from dataclasses import dataclass
from enum import IntFlag
from typing import Iterator, List, Optional, Tuple, Union

from .codecs import BOOL, INVBOOL, BoolCodec, Codec, codec_for
from .errors import RegistryFullError
from .storage import ArrayBuffer, Ref, StringBuffer, get_array, set_array
from .tokenizer import names_match

logger = logging.getLogger(__name__)


class ParamFlags(IntFlag):
    """Descriptive flags on a descriptor.

    Informational only: ``set`` and ``get`` dispatch on the storage variant
    and its codec, never on these bits.
    """
    NONE = 0
    IS_BOOL = 2


@dataclass(frozen=True)
class Scalar:
    codec: Codec
    ref: Ref


@dataclass(frozen=True)
class FixedString:
    buffer: StringBuffer


@dataclass(frozen=True)
class Array:
    buffer: ArrayBuffer


Storage = Union[Scalar, FixedString, Array]


@dataclass(frozen=True)
class ParameterDescriptor:
    """Registry entry binding a name to a codec and caller storage.

    Attributes:
        name: Parameter name as registered (matched against normalised input)
        storage: Exactly one storage variant
        flags: ``ParamFlags.IS_BOOL`` for boolean parameters (informational;
            lets callers list flag-style parameters without inspecting codecs)
    """
    name: str
    storage: Storage
    flags: ParamFlags = ParamFlags.NONE

    def __post_init__(self):
        if not self.name:
            raise ValueError("Parameter name cannot be empty")
        if not isinstance(self.storage, (Scalar, FixedString, Array)):
            raise TypeError(
                f"Parameter {self.name}: unsupported storage {type(self.storage).__name__}"
            )

    @property
    def is_bool(self) -> bool:
        """Whether the parameter accepts a bare name with no value."""
        return bool(self.flags & ParamFlags.IS_BOOL)

    def set(self, text: Optional[str]) -> None:
        """Parse ``text`` and store the result.

        Raises:
            ParamError: The value was rejected; storage of scalar and string
                parameters is left untouched
        """
        storage = self.storage
        if isinstance(storage, Scalar):
            storage.ref.set(storage.codec.parse(text))
        elif isinstance(storage, FixedString):
            storage.buffer.value = storage.buffer.codec.parse(text)
        else:
            set_array(text, storage.buffer)

    def get(self) -> str:
        """Render the stored value as text."""
        storage = self.storage
        if isinstance(storage, Scalar):
            return storage.codec.render(storage.ref.get())
        if isinstance(storage, FixedString):
            return storage.buffer.value
        return get_array(storage.buffer)

    @property
    def type_name(self) -> str:
        storage = self.storage
        if isinstance(storage, Scalar):
            return storage.codec.name
        if isinstance(storage, FixedString):
            return f"string[{storage.buffer.capacity}]"
        return f"{storage.buffer.codec.name}[{storage.buffer.max_elements}]"


class ParameterRegistry:
    """Ordered, fixed-capacity collection of parameter descriptors.

    Declaration order is also resolution and report order. The registry
    owns its descriptors but none of the storage they point at.

    Example:
        >>> count = Ref(0)
        >>> registry = ParameterRegistry(4)
        >>> _ = registry.declare_scalar("count", "int", count)
        >>> registry.resolve("count").set("5")
        >>> count.value
        5
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Registry capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._params: List[ParameterDescriptor] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def declare(self, descriptor: ParameterDescriptor) -> ParameterDescriptor:
        """Append a descriptor.

        Raises:
            RegistryFullError: The registry already holds ``capacity`` entries
            ValueError: A parameter with the same name is already declared
        """
        if len(self._params) >= self._capacity:
            raise RegistryFullError(
                f"Cannot declare '{descriptor.name}': registry holds at most "
                f"{self._capacity} parameters"
            )
        if any(p.name == descriptor.name for p in self._params):
            raise ValueError(f"Duplicate parameter name: {descriptor.name}")
        self._params.append(descriptor)
        logger.debug(f"Declared parameter {descriptor.name} ({descriptor.type_name})")
        return descriptor

    def declare_scalar(self, name: str, type_name: str, ref: Ref) -> ParameterDescriptor:
        """Declare a scalar parameter of a named type (``int``, ``ulong``, ...)."""
        codec = codec_for(type_name)
        flags = ParamFlags.IS_BOOL if isinstance(codec, BoolCodec) else ParamFlags.NONE
        return self.declare(ParameterDescriptor(name, Scalar(codec, ref), flags))

    def declare_bool(self, name: str, ref: Ref) -> ParameterDescriptor:
        return self.declare(ParameterDescriptor(name, Scalar(BOOL, ref), ParamFlags.IS_BOOL))

    def declare_invbool(self, name: str, ref: Ref) -> ParameterDescriptor:
        return self.declare(ParameterDescriptor(name, Scalar(INVBOOL, ref), ParamFlags.IS_BOOL))

    def declare_string(self, name: str, buffer: StringBuffer) -> ParameterDescriptor:
        return self.declare(ParameterDescriptor(name, FixedString(buffer)))

    def declare_array(self, name: str, buffer: ArrayBuffer) -> ParameterDescriptor:
        return self.declare(ParameterDescriptor(name, Array(buffer)))

    def resolve(self, name: str) -> Optional[ParameterDescriptor]:
        """Find the first descriptor whose name matches ``name``.

        Hyphens in ``name`` match underscores in registered names.
        """
        for param in self._params:
            if names_match(name, param.name):
                return param
        return None

    def report_all(self) -> List[Tuple[str, str]]:
        """Render every parameter as ``(name, text)`` in declaration order."""
        return [(param.name, param.get()) for param in self._params]

    def names(self) -> List[str]:
        return [param.name for param in self._params]

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    def __iter__(self) -> Iterator[ParameterDescriptor]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"ParameterRegistry({len(self)}/{self._capacity}: {', '.join(self.names())})"
