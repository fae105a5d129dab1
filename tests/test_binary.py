"""Tests for the bit and mask helpers."""
import pytest

from switchbot_adv.core.binary import get_bit, high_bit, low7, low_nibble


def test_get_bit():
    assert get_bit(0b01000000, 6) is True
    assert get_bit(0b01000000, 7) is False
    assert get_bit(0x01, 0) is True


def test_get_bit_out_of_range():
    with pytest.raises(ValueError):
        get_bit(0xFF, 8)
    with pytest.raises(ValueError):
        get_bit(0xFF, -1)


def test_low7_clears_high_bit():
    assert low7(0xE4) == 0x64
    assert low7(0x7F) == 0x7F
    assert low7(0x80) == 0


def test_high_bit():
    assert high_bit(0x80) is True
    assert high_bit(0x7F) is False


def test_low_nibble():
    assert low_nibble(0xAB) == 0x0B
    assert low_nibble(0xF0) == 0
