"""Tests for model classification from the first service data byte."""
import pytest

from switchbot_adv.domain.models import DeviceModel
from switchbot_adv.parsing.classify import classify

KNOWN_CODES = {model.value for model in DeviceModel}


@pytest.mark.parametrize(
    "code, model",
    [
        (0x42, DeviceModel.BUTTON),
        (0x48, DeviceModel.BOT),
        (0x54, DeviceModel.METER),
        (0x65, DeviceModel.HUMIDIFIER),
        (0x67, DeviceModel.PLUG_MINI_US),
        (0x69, DeviceModel.METER_PLUS),
        (0x6A, DeviceModel.PLUG_MINI_JP),
        (0x75, DeviceModel.COLOR_BULB),
    ],
)
def test_classify_known_codes(code, model):
    assert classify(code) is model


def test_high_bit_is_ignored():
    for byte in range(256):
        assert classify(byte) is classify(byte & 0x7F)


def test_unknown_codes_are_none():
    for byte in range(256):
        if byte & 0x7F not in KNOWN_CODES:
            assert classify(byte) is None


def test_all_codes_in_range():
    assert min(KNOWN_CODES) == 0x42
    assert max(KNOWN_CODES) == 0x75
    assert len(KNOWN_CODES) == len(DeviceModel)


def test_zero_is_unclassified():
    assert classify(0x00) is None
    assert classify(0x80) is None


def test_bot_with_high_bit_set():
    assert classify(0xC8) is DeviceModel.BOT
