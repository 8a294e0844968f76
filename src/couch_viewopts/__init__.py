"""couch-viewopts: validate and serialise view query options into URI query strings."""

from __future__ import annotations

from .assign import OptionAssigner, assign, create_option
from .builder import create_options, create_options_from_pairs, validate_options
from .coercers import (
    BooleanCoercer,
    CoercerRegistry,
    NumberCoercer,
    OnErrorCoercer,
    StaleCoercer,
    StringCoercer,
    ValueCoercer,
    build_default_coercers,
)
from .config import DEFAULT_CONFIG, ViewOptionsConfig
from .encoding import needs_pct_encoding, pct_encode, pct_encode_into, pct_encoded_length
from .exceptions import (
    BulkArgumentsError,
    InvalidChoiceError,
    MalformedNumberError,
    MissingNameError,
    MissingValueError,
    OptionsMemoryError,
    OptionValidationError,
    PassthroughError,
    UnrecognizedOptionError,
    ValueTypeError,
    ViewOptionError,
)
from .flags import AssignFlags
from .query import ViewQuery
from .query_string import QueryStringBuilder, calc_length, make_uri, write_query
from .record import OptionRecord, StoredBytes, cleanup_list
from .registry import (
    DEFAULT_REGISTRY,
    OptionKind,
    OptionRegistry,
    RegistryEntry,
    ViewOption,
    build_default_registry,
)
from .result import ValidationResult

__all__ = [
    # Flags and registry
    "AssignFlags",
    "OptionKind",
    "ViewOption",
    "RegistryEntry",
    "OptionRegistry",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    # Records and assignment
    "OptionRecord",
    "StoredBytes",
    "cleanup_list",
    "OptionAssigner",
    "assign",
    "create_option",
    # Coercers
    "ValueCoercer",
    "CoercerRegistry",
    "BooleanCoercer",
    "NumberCoercer",
    "StringCoercer",
    "StaleCoercer",
    "OnErrorCoercer",
    "build_default_coercers",
    # Bulk building
    "create_options",
    "create_options_from_pairs",
    "validate_options",
    "ValidationResult",
    # Serialisation
    "calc_length",
    "write_query",
    "make_uri",
    "QueryStringBuilder",
    "ViewQuery",
    # Percent-encoding
    "needs_pct_encoding",
    "pct_encoded_length",
    "pct_encode_into",
    "pct_encode",
    # Configuration
    "ViewOptionsConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "ViewOptionError",
    "OptionValidationError",
    "MissingNameError",
    "MissingValueError",
    "PassthroughError",
    "UnrecognizedOptionError",
    "ValueTypeError",
    "MalformedNumberError",
    "InvalidChoiceError",
    "BulkArgumentsError",
    "OptionsMemoryError",
]
