from __future__ import annotations


LOW7_MASK = 0b01111111
HIGH_BIT_MASK = 0b10000000


def get_bit(byte_value: int, bit_index: int) -> bool:
    if bit_index < 0 or bit_index > 7:
        raise ValueError("bit_index must be between 0 and 7")
    return bool(byte_value & (1 << bit_index))


def low7(byte_value: int) -> int:
    return byte_value & LOW7_MASK


def high_bit(byte_value: int) -> bool:
    return bool(byte_value & HIGH_BIT_MASK)


def low_nibble(byte_value: int) -> int:
    return byte_value & 0x0F
