"""
Operations — Арифметика над двоичными операндами

Модуль декодирует два операнда одной схемы, выполняет операцию
в обычной знаковой целочисленной арифметике и кодирует результат
обратно в ту же схему и разрядность:

    operate → bin_to_dec ×2 → арифметика → dec_to_bin ×1 → OperationResult

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Одна схема для обоих операндов и результата
2. Деление усекается к нулю (-7 / 2 == -3), не floor
3. Делитель 0 → DivisionByZero (fail fast)
4. Результат вне диапазона разрядности → Overflow
"""

import logging
import operator
from typing import Callable, Final

from binrep.core.codec.bitwise import validate_bit_width
from binrep.core.codec.decoder import bin_to_dec
from binrep.core.codec.encoder import dec_to_bin
from binrep.core.contracts.validators import validate_operation_request
from binrep.core.domain.operation import OperationRequest, OperationResult
from binrep.core.domain.scheme import Operation, Scheme, parse_operation, parse_scheme
from binrep.core.errors import DivisionByZero

logger = logging.getLogger(__name__)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def truncating_divide(dividend: int, divisor: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python // округляет к -inf, поэтому частное считается по модулям,
    а знак восстанавливается отдельно.

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> truncating_divide(5, 3)
        1
        >>> truncating_divide(-7, 2)
        -3
        >>> truncating_divide(7, -2)
        -3
    """
    if divisor == 0:
        raise DivisionByZero(f"Division by zero: {dividend} / 0")

    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


_APPLY: Final[dict[Operation, Callable[[int, int], int]]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: truncating_divide,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def operate(
    a: str,
    b: str,
    op: Operation | str,
    scheme: Scheme | str,
    bits: int,
) -> OperationResult:
    """
    Операция над двумя двоичными операндами одной схемы.

    Args:
        a: Первый операнд (строка длины bits)
        b: Второй операнд (строка длины bits)
        op: Операция ("+", "-", "*", "/")
        scheme: Схема операндов и результата
        bits: Разрядность операндов и результата

    Returns:
        OperationResult; as_pair() даёт (двоичный результат, десятичная строка)

    Raises:
        InvalidScheme: Неизвестная схема
        InvalidOperation: Неизвестная операция
        InvalidBitWidth: bits вне допустимого диапазона
        MalformedInput: Операнд некорректен или его длина != bits
        DivisionByZero: "/" с делителем 0
        Overflow: Результат не помещается в bits

    Examples:
        >>> operate("00000101", "11111101", "+", "c2", 8).as_pair()
        ('00000010', '2')
        >>> operate("00000101", "00000011", "/", "c2", 8).as_pair()
        ('00000001', '1')
    """
    resolved_scheme = parse_scheme(scheme)
    resolved_op = parse_operation(op)
    validate_bit_width(bits)

    dec_a = bin_to_dec(a, resolved_scheme, bits)
    dec_b = bin_to_dec(b, resolved_scheme, bits)

    value = _APPLY[resolved_op](dec_a, dec_b)
    binary = dec_to_bin(value, bits, resolved_scheme)

    logger.debug(
        "%s %s %s = %s [%s, %d bits] -> %s",
        dec_a,
        resolved_op.value,
        dec_b,
        value,
        resolved_scheme.value,
        bits,
        binary,
    )

    return OperationResult(
        binary=binary,
        decimal=str(value),
        value=value,
        scheme=resolved_scheme,
        bits=bits,
    )


def operate_request(request: OperationRequest) -> OperationResult:
    """
    Выполнение операции, описанной OperationRequest.

    Запрос сначала проверяется по контракту operation_request.

    Raises:
        jsonschema.ValidationError: Запрос нарушает контракт
        BinaryRepresentationError: Как у operate
    """
    validate_operation_request(request.model_dump(mode="json"))
    return operate(request.a, request.b, request.op, request.scheme, request.bits)
