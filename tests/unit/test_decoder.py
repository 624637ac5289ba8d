"""
Тесты для модуля Decoder

Проверяет:
1. Декодирование по каждой из четырёх схем
2. Оба представления нуля (sm, c1) → 0
3. Приём строковых тегов и Scheme
4. Явные ошибки вместо fallback на 0
"""

import pytest

from binrep.core.codec.decoder import bin_to_dec
from binrep.core.domain.scheme import Scheme
from binrep.core.errors import InvalidBitWidth, InvalidScheme, MalformedInput


class TestSignMagnitude:
    """Прямой код (sm)"""

    def test_positive(self) -> None:
        assert bin_to_dec("00000101", "sm") == 5
        assert bin_to_dec("01111111", "sm") == 127

    def test_negative(self) -> None:
        assert bin_to_dec("10000011", "sm") == -3
        assert bin_to_dec("11111111", "sm") == -127

    def test_both_zeros(self) -> None:
        """+0 и -0 декодируются в 0"""
        assert bin_to_dec("00000000", "sm") == 0
        assert bin_to_dec("10000000", "sm") == 0


class TestOnesComplement:
    """Обратный код (c1)"""

    def test_positive(self) -> None:
        assert bin_to_dec("00000101", "c1") == 5

    def test_negative_is_inverted_magnitude(self) -> None:
        assert bin_to_dec("11111100", "c1") == -3
        assert bin_to_dec("10000000", "c1") == -127

    def test_both_zeros(self) -> None:
        assert bin_to_dec("00000000", "c1") == 0
        assert bin_to_dec("11111111", "c1") == 0


class TestTwosComplement:
    """Дополнительный код (c2)"""

    def test_positive(self) -> None:
        assert bin_to_dec("00000101", "c2") == 5
        assert bin_to_dec("01111111", "c2") == 127

    def test_negative(self) -> None:
        assert bin_to_dec("11111101", "c2") == -3
        assert bin_to_dec("11111111", "c2") == -1
        assert bin_to_dec("10000000", "c2") == -128

    def test_width_from_length(self) -> None:
        """Разрядность берётся из длины строки"""
        assert bin_to_dec("1101", "c2") == -3
        assert bin_to_dec("1111111111111101", "c2") == -3


class TestBiased:
    """Смещённый код (polarizada)"""

    def test_zero_at_bias(self) -> None:
        assert bin_to_dec("01111111", "polarizada") == 0

    def test_extremes(self) -> None:
        assert bin_to_dec("00000000", "polarizada") == -127
        assert bin_to_dec("11111111", "polarizada") == 128

    def test_four_bits(self) -> None:
        """bias(4) = 7"""
        assert bin_to_dec("0111", "polarizada") == 0
        assert bin_to_dec("1010", "polarizada") == 3


class TestSchemeArgument:
    """Тег схемы"""

    def test_enum_and_tag_equivalent(self) -> None:
        for scheme in Scheme:
            assert bin_to_dec("1010", scheme) == bin_to_dec("1010", scheme.value)

    @pytest.mark.parametrize("scheme", ["c3", "SM", "", "twos", None])
    def test_unknown_scheme_raises(self, scheme) -> None:
        with pytest.raises(InvalidScheme, match="Unknown encoding scheme"):
            bin_to_dec("0101", scheme)


class TestMalformedInput:
    """Некорректный ввод"""

    def test_invalid_characters(self) -> None:
        with pytest.raises(MalformedInput):
            bin_to_dec("01012", "c2")

    def test_expected_width_mismatch(self) -> None:
        with pytest.raises(MalformedInput, match="expected 8"):
            bin_to_dec("0101", "c2", bits=8)

    def test_expected_width_match(self) -> None:
        assert bin_to_dec("11111101", "c2", bits=8) == -3

    def test_empty(self) -> None:
        with pytest.raises(MalformedInput):
            bin_to_dec("", "c2")

    def test_single_bit_rejected(self) -> None:
        with pytest.raises(InvalidBitWidth):
            bin_to_dec("1", "sm")
