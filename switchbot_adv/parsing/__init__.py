"""
This package contains everything related to turning raw SwitchBot
advertisement bytes into typed values.

- ``classify``: model code lookup from the first service data byte.
- ``readings``: the per-family reading dataclasses.
- ``decode``: length validation and field extraction for each family.
"""
from switchbot_adv.parsing.classify import classify
from switchbot_adv.parsing.decode import DecodeResult, decode, inspect_advertisement
from switchbot_adv.parsing.readings import (
    BotReading,
    HumidifierReading,
    MeterReading,
    PlugReading,
    Reading,
)

__all__ = [
    "classify",
    "decode",
    "inspect_advertisement",
    "DecodeResult",
    "BotReading",
    "HumidifierReading",
    "MeterReading",
    "PlugReading",
    "Reading",
]
