"""
Codec — преобразования двоичная строка ↔ знаковое целое.

Битовые примитивы, декодер и энкодер для схем sm / c1 / c2 / polarizada.
"""

# Bitwise primitives
from binrep.core.codec.bitwise import (
    bias,
    format_bits,
    invert,
    mask,
    parse_bits,
    sign_bit,
    validate_bit_width,
    value_range,
)

# Decoder
from binrep.core.codec.decoder import bin_to_dec

# Encoder
from binrep.core.codec.encoder import dec_to_bin, fits

__all__ = [
    # Bitwise — Primitives
    "bias",
    "format_bits",
    "invert",
    "mask",
    "parse_bits",
    "sign_bit",
    # Bitwise — Validation
    "validate_bit_width",
    "value_range",
    # Decoder
    "bin_to_dec",
    # Encoder
    "dec_to_bin",
    "fits",
]
