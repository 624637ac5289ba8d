"""
Domain types and value objects.

Contains the scheme/operation enums and the immutable request/result models.
"""

from binrep.core.domain.operation import OperationRequest, OperationResult
from binrep.core.domain.scheme import (
    DEFAULT_BITS,
    MAX_BITS,
    MIN_BITS,
    Operation,
    Scheme,
    parse_operation,
    parse_scheme,
)

__all__ = [
    # Scheme module
    "DEFAULT_BITS",
    "MAX_BITS",
    "MIN_BITS",
    "Scheme",
    "Operation",
    "parse_scheme",
    "parse_operation",
    # Operation models
    "OperationRequest",
    "OperationResult",
]
