"""
Bitwise — Битовые примитивы фиксированной разрядности

Модуль содержит общие примитивы для декодера и энкодера:
- Маски и смещение (bias) для разрядности bits
- Разбор двоичной строки в целое без знака с валидацией
- Форматирование целого без знака в строку ровно bits символов
- Диапазоны представимых значений для каждой схемы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся работа с битами — через mask/shift/XOR над int, не через строки
2. format_bits всегда возвращает строку длины ровно bits
3. Некорректный ввод → исключение из binrep.core.errors, не 0 и не ""
"""

from binrep.core.domain.scheme import MAX_BITS, MIN_BITS, Scheme, parse_scheme
from binrep.core.errors import InvalidBitWidth, MalformedInput, Overflow

_BINARY_DIGITS = frozenset("01")


# =============================================================================
# РАЗРЯДНОСТЬ
# =============================================================================


def validate_bit_width(bits: int) -> int:
    """
    Проверка разрядности.

    Args:
        bits: Разрядность

    Returns:
        bits без изменений

    Raises:
        InvalidBitWidth: Если bits не int или вне [MIN_BITS, MAX_BITS]
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise InvalidBitWidth(f"Bit width must be an int, got {type(bits).__name__}")

    if not MIN_BITS <= bits <= MAX_BITS:
        raise InvalidBitWidth(
            f"Bit width must be in [{MIN_BITS}, {MAX_BITS}], got {bits}"
        )

    return bits


def mask(bits: int) -> int:
    """
    Маска из bits единиц.

    Examples:
        >>> mask(4)
        15
        >>> mask(8)
        255
    """
    return (1 << bits) - 1


def sign_bit(bits: int) -> int:
    """Вес старшего (знакового) бита: 2^(bits-1)."""
    return 1 << (bits - 1)


def bias(bits: int) -> int:
    """
    Смещение excess-K для разрядности bits: 2^(bits-1) - 1.

    Examples:
        >>> bias(8)
        127
        >>> bias(4)
        7
    """
    return sign_bit(bits) - 1


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def value_range(scheme: Scheme | str, bits: int) -> tuple[int, int]:
    """
    Диапазон представимых значений [min, max] для схемы и разрядности.

    - sm, c1:     [-(2^(bits-1)-1), 2^(bits-1)-1]  (два нуля)
    - c2:         [-2^(bits-1),     2^(bits-1)-1]
    - polarizada: [-(2^(bits-1)-1), 2^(bits-1)]

    Raises:
        InvalidScheme: Неизвестная схема
        InvalidBitWidth: Если bits вне допустимого диапазона

    Examples:
        >>> value_range(Scheme.TWOS_COMPLEMENT, 8)
        (-128, 127)
        >>> value_range(Scheme.BIASED, 8)
        (-127, 128)
    """
    resolved = parse_scheme(scheme)
    validate_bit_width(bits)
    half = sign_bit(bits)

    if resolved is Scheme.TWOS_COMPLEMENT:
        return (-half, half - 1)
    if resolved is Scheme.BIASED:
        return (-(half - 1), half)
    # SIGN_MAGNITUDE и ONES_COMPLEMENT симметричны
    return (-(half - 1), half - 1)


# =============================================================================
# РАЗБОР И ФОРМАТИРОВАНИЕ
# =============================================================================


def parse_bits(binary: str, bits: int | None = None) -> tuple[int, int]:
    """
    Разбор двоичной строки (MSB первым) в целое без знака.

    Args:
        binary: Строка из '0' и '1'
        bits: Ожидаемая разрядность (optional). Если задана, длина строки
            обязана с ней совпадать.

    Returns:
        (raw, width): значение без знака и фактическая разрядность len(binary)

    Raises:
        MalformedInput: Не строка, пустая строка, посторонние символы,
            несовпадение длины с bits
        InvalidBitWidth: Длина строки вне [MIN_BITS, MAX_BITS]

    Examples:
        >>> parse_bits("0101")
        (5, 4)
        >>> parse_bits("11111101", bits=8)
        (253, 8)
    """
    if not isinstance(binary, str):
        raise MalformedInput(
            f"Binary input must be a string, got {type(binary).__name__}"
        )

    if not binary:
        raise MalformedInput("Binary input must not be empty")

    invalid = set(binary) - _BINARY_DIGITS
    if invalid:
        raise MalformedInput(
            f"Binary input {binary!r} contains invalid characters: "
            f"{''.join(sorted(invalid))!r}"
        )

    width = len(binary)
    if bits is not None:
        validate_bit_width(bits)
        if width != bits:
            raise MalformedInput(
                f"Binary input {binary!r} has {width} bits, expected {bits}"
            )
    else:
        validate_bit_width(width)

    return int(binary, 2), width


def format_bits(pattern: int, bits: int) -> str:
    """
    Форматирование целого без знака в строку ровно bits символов.

    Raises:
        Overflow: Если pattern не помещается в bits (энкодер проверяет
            диапазон до форматирования)
    """
    if pattern < 0 or pattern > mask(bits):
        raise Overflow(f"Pattern {pattern} does not fit in {bits} bits")

    return format(pattern, f"0{bits}b")


def invert(pattern: int, bits: int) -> int:
    """Побитовая инверсия в пределах bits (XOR с маской)."""
    return pattern ^ mask(bits)
