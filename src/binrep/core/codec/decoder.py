"""
Decoder — Двоичная строка → знаковое целое

Модуль декодирует двоичную строку фиксированной разрядности
(MSB первым) в знаковое целое по одной из четырёх схем:
- sm:         старший бит — знак, остальные n-1 бит — модуль
- c1:         MSB=0 → без знака; иначе -(инверсия всех бит)
- c2:         MSB=0 → без знака; иначе raw - 2^n
- polarizada: raw - (2^(n-1) - 1)

Разрядность n берётся из длины строки. Оба представления нуля в sm и c1
декодируются в 0.
"""

from typing import Callable, Final

from binrep.core.codec.bitwise import bias, invert, mask, parse_bits, sign_bit
from binrep.core.domain.scheme import Scheme, parse_scheme

# =============================================================================
# ДЕКОДЕРЫ ПО СХЕМАМ
# =============================================================================


def _decode_sign_magnitude(raw: int, n: int) -> int:
    magnitude = raw & mask(n - 1)
    if raw & sign_bit(n):
        return -magnitude
    return magnitude


def _decode_ones_complement(raw: int, n: int) -> int:
    if raw & sign_bit(n):
        # 11...1 → -0 == 0
        return -invert(raw, n)
    return raw


def _decode_twos_complement(raw: int, n: int) -> int:
    if raw & sign_bit(n):
        return raw - (1 << n)
    return raw


def _decode_biased(raw: int, n: int) -> int:
    return raw - bias(n)


_DECODERS: Final[dict[Scheme, Callable[[int, int], int]]] = {
    Scheme.SIGN_MAGNITUDE: _decode_sign_magnitude,
    Scheme.ONES_COMPLEMENT: _decode_ones_complement,
    Scheme.TWOS_COMPLEMENT: _decode_twos_complement,
    Scheme.BIASED: _decode_biased,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def bin_to_dec(binary: str, scheme: Scheme | str, bits: int | None = None) -> int:
    """
    Декодирование двоичной строки в знаковое целое.

    Args:
        binary: Строка из '0'/'1', старший бит первым
        scheme: Схема (Scheme или тег "sm", "c1", "c2", "polarizada")
        bits: Ожидаемая разрядность (optional). Без неё разрядность
            берётся из len(binary).

    Returns:
        Знаковое целое, закодированное строкой

    Raises:
        InvalidScheme: Неизвестная схема
        MalformedInput: Посторонние символы, пустая строка, несовпадение длины
        InvalidBitWidth: Длина строки вне [MIN_BITS, MAX_BITS]

    Examples:
        >>> bin_to_dec("00000101", "c2")
        5
        >>> bin_to_dec("11111101", "c2")
        -3
        >>> bin_to_dec("10000000", "sm")
        0
        >>> bin_to_dec("01111111", "polarizada")
        0
    """
    resolved = parse_scheme(scheme)
    raw, n = parse_bits(binary, bits)
    return _DECODERS[resolved](raw, n)
