"""
Encoder — Знаковое целое → двоичная строка фиксированной разрядности

Модуль кодирует знаковое целое в строку ровно bits символов
по одной из четырёх схем:
- sm:         бит знака (1 если num < 0) + abs(num) в младших bits-1 битах
- c1:         num >= 0 → без знака; иначе abs(num) XOR mask(bits)
- c2:         num >= 0 → без знака; иначе 2^bits + num
- polarizada: num + (2^(bits-1) - 1) без знака

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда дополнен ведущими нулями ровно до bits символов
2. Значение вне value_range(scheme, bits) → Overflow (не длинная строка)
"""

from typing import Callable, Final

from binrep.core.codec.bitwise import (
    bias,
    format_bits,
    invert,
    sign_bit,
    validate_bit_width,
    value_range,
)
from binrep.core.domain.scheme import Scheme, parse_scheme
from binrep.core.errors import MalformedInput, Overflow

# =============================================================================
# ЭНКОДЕРЫ ПО СХЕМАМ
# =============================================================================
# Каждый энкодер получает уже проверенное по диапазону значение и
# возвращает битовый шаблон без знака в пределах mask(bits).


def _encode_sign_magnitude(num: int, bits: int) -> int:
    if num < 0:
        return sign_bit(bits) | -num
    return num


def _encode_ones_complement(num: int, bits: int) -> int:
    if num < 0:
        return invert(-num, bits)
    return num


def _encode_twos_complement(num: int, bits: int) -> int:
    if num < 0:
        return (1 << bits) + num
    return num


def _encode_biased(num: int, bits: int) -> int:
    return num + bias(bits)


_ENCODERS: Final[dict[Scheme, Callable[[int, int], int]]] = {
    Scheme.SIGN_MAGNITUDE: _encode_sign_magnitude,
    Scheme.ONES_COMPLEMENT: _encode_ones_complement,
    Scheme.TWOS_COMPLEMENT: _encode_twos_complement,
    Scheme.BIASED: _encode_biased,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def fits(num: int, bits: int, scheme: Scheme | str) -> bool:
    """
    Проверка, представимо ли num в разрядности bits по схеме scheme.

    Returns:
        True если min <= num <= max для value_range(scheme, bits)

    Raises:
        InvalidScheme: Неизвестная схема
        InvalidBitWidth: bits вне допустимого диапазона
    """
    low, high = value_range(scheme, bits)
    return low <= num <= high


def dec_to_bin(num: int, bits: int, scheme: Scheme | str) -> str:
    """
    Кодирование знакового целого в двоичную строку ровно bits символов.

    Args:
        num: Знаковое целое
        bits: Разрядность результата
        scheme: Схема (Scheme или тег "sm", "c1", "c2", "polarizada")

    Returns:
        Строка из '0'/'1' длины bits, старший бит первым

    Raises:
        InvalidScheme: Неизвестная схема
        InvalidBitWidth: bits вне [MIN_BITS, MAX_BITS]
        MalformedInput: num не является int
        Overflow: num вне value_range(scheme, bits)

    Examples:
        >>> dec_to_bin(5, 8, "c2")
        '00000101'
        >>> dec_to_bin(-3, 8, "c2")
        '11111101'
        >>> dec_to_bin(-3, 8, "sm")
        '10000011'
        >>> dec_to_bin(0, 8, "polarizada")
        '01111111'
    """
    resolved = parse_scheme(scheme)
    validate_bit_width(bits)

    if isinstance(num, bool) or not isinstance(num, int):
        raise MalformedInput(f"Value must be an int, got {type(num).__name__}")

    low, high = value_range(resolved, bits)
    if not low <= num <= high:
        raise Overflow(
            f"Value {num} does not fit in {bits} bits for scheme "
            f"{resolved.value!r} (range [{low}, {high}])"
        )

    return format_bits(_ENCODERS[resolved](num, bits), bits)
