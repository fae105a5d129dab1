"""
Typed readings decoded from SwitchBot advertisements, one per device family.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Union

from switchbot_adv.domain.models import DeviceFamily


@dataclass(frozen=True)
class BotReading:
    """
    State broadcast by a Bot.

    Attributes:
        battery: Battery level in percent.
        state: ``True`` when the switch is on.
    """
    family: ClassVar[DeviceFamily] = DeviceFamily.BOT

    battery: int
    state: bool

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MeterReading:
    """
    Measurements broadcast by a Meter or Meter Plus.

    Attributes:
        battery: Battery level in percent.
        temperature: Whole degrees Celsius.
        humidity: Relative humidity in percent.
    """
    family: ClassVar[DeviceFamily] = DeviceFamily.METER

    battery: int
    temperature: int
    humidity: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HumidifierReading:
    """
    State broadcast by a Humidifier.

    Attributes:
        state: ``True`` when the humidifier is running.
        humidity: Humidity level in percent.
        auto_mode: ``True`` when running in automatic mode.
    """
    family: ClassVar[DeviceFamily] = DeviceFamily.HUMIDIFIER

    state: bool
    humidity: int
    auto_mode: bool

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PlugReading:
    """
    State broadcast by a Plug Mini (US or JP).

    Attributes:
        wifi_rssi: Wi-Fi signal strength in dBm, never positive.
        state: ``True`` when the relay is on.
        watts: Current load in whole watts.
        overload: ``True`` when the plug reports an overload.
    """
    family: ClassVar[DeviceFamily] = DeviceFamily.PLUG

    wifi_rssi: int
    state: bool
    watts: int
    overload: bool

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


Reading = Union[BotReading, MeterReading, HumidifierReading, PlugReading]

__all__ = ["BotReading", "MeterReading", "HumidifierReading", "PlugReading", "Reading"]
