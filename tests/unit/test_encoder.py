"""
Тесты для модуля Encoder

Проверяет:
1. Кодирование по каждой из четырёх схем
2. Дополнение ведущими нулями ровно до bits
3. Overflow вместо длинных строк
4. Обратимость: bin_to_dec(dec_to_bin(num)) == num на всём диапазоне
"""

import pytest

from binrep.core.codec.bitwise import value_range
from binrep.core.codec.decoder import bin_to_dec
from binrep.core.codec.encoder import dec_to_bin, fits
from binrep.core.domain.scheme import Scheme
from binrep.core.errors import InvalidBitWidth, InvalidScheme, MalformedInput, Overflow

# =============================================================================
# ТЕСТЫ ПО СХЕМАМ
# =============================================================================


class TestTwosComplement:
    """Дополнительный код (c2)"""

    def test_positive(self) -> None:
        assert dec_to_bin(5, 8, "c2") == "00000101"

    def test_negative(self) -> None:
        assert dec_to_bin(-3, 8, "c2") == "11111101"
        assert dec_to_bin(-1, 4, "c2") == "1111"

    def test_extremes(self) -> None:
        assert dec_to_bin(-128, 8, "c2") == "10000000"
        assert dec_to_bin(127, 8, "c2") == "01111111"


class TestSignMagnitude:
    """Прямой код (sm)"""

    def test_values(self) -> None:
        assert dec_to_bin(5, 8, "sm") == "00000101"
        assert dec_to_bin(-3, 8, "sm") == "10000011"
        assert dec_to_bin(-127, 8, "sm") == "11111111"

    def test_zero_is_positive(self) -> None:
        assert dec_to_bin(0, 8, "sm") == "00000000"


class TestOnesComplement:
    """Обратный код (c1)"""

    def test_values(self) -> None:
        assert dec_to_bin(5, 8, "c1") == "00000101"
        assert dec_to_bin(-3, 8, "c1") == "11111100"
        assert dec_to_bin(-127, 8, "c1") == "10000000"

    def test_zero_is_positive(self) -> None:
        assert dec_to_bin(0, 8, "c1") == "00000000"


class TestBiased:
    """Смещённый код (polarizada)"""

    def test_zero_is_bias(self) -> None:
        assert dec_to_bin(0, 8, "polarizada") == "01111111"
        assert bin_to_dec("01111111", "polarizada") == 0

    def test_extremes(self) -> None:
        assert dec_to_bin(-127, 8, "polarizada") == "00000000"
        assert dec_to_bin(128, 8, "polarizada") == "11111111"
        assert dec_to_bin(1, 8, "polarizada") == "10000000"


# =============================================================================
# ПЕРЕПОЛНЕНИЕ И ОШИБКИ
# =============================================================================


class TestOverflow:
    """Значения вне диапазона"""

    @pytest.mark.parametrize(
        "num, scheme",
        [
            (128, "c2"),
            (-129, "c2"),
            (-128, "sm"),
            (128, "sm"),
            (-128, "c1"),
            (-128, "polarizada"),
            (129, "polarizada"),
        ],
    )
    def test_out_of_range_raises(self, num: int, scheme: str) -> None:
        with pytest.raises(Overflow, match="does not fit in 8 bits"):
            dec_to_bin(num, 8, scheme)

    def test_overflow_is_overflow_error(self) -> None:
        with pytest.raises(OverflowError):
            dec_to_bin(1 << 20, 8, "c2")


class TestEncoderErrors:
    """Некорректные аргументы"""

    def test_unknown_scheme(self) -> None:
        with pytest.raises(InvalidScheme):
            dec_to_bin(5, 8, "excess")

    @pytest.mark.parametrize("bits", [0, 1, 33])
    def test_invalid_bits(self, bits: int) -> None:
        with pytest.raises(InvalidBitWidth):
            dec_to_bin(0, bits, "c2")

    @pytest.mark.parametrize("num", [1.0, "5", True, None])
    def test_non_int_value(self, num) -> None:
        with pytest.raises(MalformedInput, match="must be an int"):
            dec_to_bin(num, 8, "c2")


class TestFits:
    """Тесты для fits"""

    def test_boundaries(self) -> None:
        assert fits(127, 8, "c2")
        assert fits(-128, 8, "c2")
        assert not fits(128, 8, "c2")
        assert not fits(-128, 8, "sm")
        assert fits(128, 8, Scheme.BIASED)

    def test_unknown_scheme(self) -> None:
        with pytest.raises(InvalidScheme):
            fits(0, 8, "nope")


# =============================================================================
# ОБРАТИМОСТЬ НА ВСЁМ ДИАПАЗОНЕ
# =============================================================================


@pytest.mark.parametrize("bits", [4, 8, 16])
@pytest.mark.parametrize("scheme", list(Scheme))
def test_round_trip_full_range(scheme: Scheme, bits: int) -> None:
    """Каждое представимое значение кодируется в bits символов и декодируется обратно"""
    low, high = value_range(scheme, bits)
    for num in range(low, high + 1):
        binary = dec_to_bin(num, bits, scheme)
        assert len(binary) == bits
        assert bin_to_dec(binary, scheme) == num
