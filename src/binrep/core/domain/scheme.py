"""
Scheme — Схемы кодирования и арифметические операции

Закрытые перечисления вместо строковых тегов:
- Scheme: sm / c1 / c2 / polarizada
- Operation: + - * /

Строковые теги разбираются через parse_scheme / parse_operation.
Неизвестный тег → исключение (никакого молчаливого fallback на 0 или "").
"""

from enum import Enum
from typing import Final

from binrep.core.errors import InvalidOperation, InvalidScheme

# =============================================================================
# ОГРАНИЧЕНИЯ РАЗРЯДНОСТИ
# =============================================================================

# Минимальная разрядность: 1 бит знака + хотя бы 1 бит значения
MIN_BITS: Final[int] = 2

# Максимальная разрядность: нативное 32-битное знаковое целое
MAX_BITS: Final[int] = 32

# Разрядность по умолчанию (байт)
DEFAULT_BITS: Final[int] = 8


# =============================================================================
# ENUMS
# =============================================================================


class Scheme(str, Enum):
    """Схема знакового двоичного представления"""

    SIGN_MAGNITUDE = "sm"
    ONES_COMPLEMENT = "c1"
    TWOS_COMPLEMENT = "c2"
    BIASED = "polarizada"


class Operation(str, Enum):
    """Арифметическая операция над декодированными операндами"""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# =============================================================================
# PARSING
# =============================================================================


def parse_scheme(value: Scheme | str) -> Scheme:
    """
    Разбор тега схемы.

    Args:
        value: Scheme или строковый тег ("sm", "c1", "c2", "polarizada")

    Returns:
        Соответствующий Scheme

    Raises:
        InvalidScheme: Если тег не распознан

    Examples:
        >>> parse_scheme("c2")
        <Scheme.TWOS_COMPLEMENT: 'c2'>
        >>> parse_scheme(Scheme.BIASED)
        <Scheme.BIASED: 'polarizada'>
    """
    if isinstance(value, Scheme):
        return value

    try:
        return Scheme(value)
    except ValueError:
        allowed = ", ".join(repr(s.value) for s in Scheme)
        raise InvalidScheme(
            f"Unknown encoding scheme {value!r}, expected one of: {allowed}"
        ) from None


def parse_operation(value: Operation | str) -> Operation:
    """
    Разбор символа операции.

    Raises:
        InvalidOperation: Если символ не распознан
    """
    if isinstance(value, Operation):
        return value

    try:
        return Operation(value)
    except ValueError:
        allowed = ", ".join(repr(o.value) for o in Operation)
        raise InvalidOperation(
            f"Unknown operation {value!r}, expected one of: {allowed}"
        ) from None
