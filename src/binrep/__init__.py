"""
binrep — знаковые двоичные представления фиксированной разрядности.

Декодирование, кодирование и арифметика для четырёх схем:
прямой код (sm), обратный код (c1), дополнительный код (c2),
смещённый код (polarizada).
"""

from binrep.core import (
    BinaryRepresentationError,
    DivisionByZero,
    InvalidBitWidth,
    InvalidOperation,
    InvalidScheme,
    MalformedInput,
    Operation,
    OperationRequest,
    OperationResult,
    Overflow,
    Scheme,
    bin_to_dec,
    dec_to_bin,
    fits,
    operate,
    operate_request,
    value_range,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Types
    "Scheme",
    "Operation",
    "OperationRequest",
    "OperationResult",
    # Functions
    "bin_to_dec",
    "dec_to_bin",
    "fits",
    "value_range",
    "operate",
    "operate_request",
    # Exceptions
    "BinaryRepresentationError",
    "InvalidScheme",
    "InvalidOperation",
    "DivisionByZero",
    "MalformedInput",
    "InvalidBitWidth",
    "Overflow",
]
