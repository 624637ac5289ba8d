"""
Core codec, domain models and arithmetic.

Everything here is a pure function of its inputs: no I/O, no shared state.
"""

from binrep.core.arithmetic import operate, operate_request, truncating_divide
from binrep.core.codec import bin_to_dec, dec_to_bin, fits, value_range
from binrep.core.domain import (
    DEFAULT_BITS,
    MAX_BITS,
    MIN_BITS,
    Operation,
    OperationRequest,
    OperationResult,
    Scheme,
    parse_operation,
    parse_scheme,
)
from binrep.core.errors import (
    BinaryRepresentationError,
    DivisionByZero,
    InvalidBitWidth,
    InvalidOperation,
    InvalidScheme,
    MalformedInput,
    Overflow,
)

__all__ = [
    "DEFAULT_BITS",
    "MAX_BITS",
    "MIN_BITS",
    "Operation",
    "OperationRequest",
    "OperationResult",
    "Scheme",
    "parse_operation",
    "parse_scheme",
    "bin_to_dec",
    "dec_to_bin",
    "fits",
    "value_range",
    "operate",
    "operate_request",
    "truncating_divide",
    "BinaryRepresentationError",
    "DivisionByZero",
    "InvalidBitWidth",
    "InvalidOperation",
    "InvalidScheme",
    "MalformedInput",
    "Overflow",
]
