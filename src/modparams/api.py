"""Public API for modparams.

Declare typed parameters in a registry, parse ``name=value`` argument
strings into caller-owned storage, and render the stored values back.
"""

# Errors
from .errors import (
    ErrorKind,
    ParamError,
    UnknownParameterError,
    InvalidFormatError,
    BufferTooSmallError,
    MissingValueError,
    TooManyElementsError,
    TooFewElementsError,
    RegistryFullError,
)

# Numeric parsing
from .numeric import parse_strict, parse_strict_unsigned

# Codecs
from .codecs import (
    Codec,
    IntegerCodec,
    BoolCodec,
    InvBoolCodec,
    StringCodec,
    codec_for,
    scalar_types,
)

# Storage
from .storage import (
    Ref,
    AttrRef,
    StringBuffer,
    ArrayBuffer,
    set_array,
    get_array,
)

# Tokenizer
from .tokenizer import iter_args, next_arg, normalize_name

# Registry
from .registry import (
    ParamFlags,
    Scalar,
    FixedString,
    Array,
    ParameterDescriptor,
    ParameterRegistry,
)

# Driver
from .driver import parse_args, parse_string, parse_status

# Environment
from .environ import getenv_str, getenv_int

# Version
try:
    from importlib.metadata import version
    __version__ = version("modparams")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Errors
    "ErrorKind",
    "ParamError",
    "UnknownParameterError",
    "InvalidFormatError",
    "BufferTooSmallError",
    "MissingValueError",
    "TooManyElementsError",
    "TooFewElementsError",
    "RegistryFullError",

    # Numeric parsing
    "parse_strict",
    "parse_strict_unsigned",

    # Codecs
    "Codec",
    "IntegerCodec",
    "BoolCodec",
    "InvBoolCodec",
    "StringCodec",
    "codec_for",
    "scalar_types",

    # Storage
    "Ref",
    "AttrRef",
    "StringBuffer",
    "ArrayBuffer",
    "set_array",
    "get_array",

    # Tokenizer
    "iter_args",
    "next_arg",
    "normalize_name",

    # Registry
    "ParamFlags",
    "Scalar",
    "FixedString",
    "Array",
    "ParameterDescriptor",
    "ParameterRegistry",

    # Driver
    "parse_args",
    "parse_string",
    "parse_status",

    # Environment
    "getenv_str",
    "getenv_int",

    # Version
    "__version__",
]
