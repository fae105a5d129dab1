"""
Device model catalog for SwitchBot BLE advertisements.

Every SwitchBot device identifies its model in the first byte of the service
data it broadcasts in SCAN_RSP. This module holds the closed set of known model
codes, the reading family each model decodes into, and a read-only catalog for
resolving models by code, name, or family.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UnknownDeviceModelError(ValueError):
    pass


class DeviceFamily(str, Enum):
    """Reading layouts the decoder knows how to extract."""
    BOT = "bot"
    METER = "meter"
    HUMIDIFIER = "humidifier"
    PLUG = "plug"


class DeviceModel(int, Enum):
    """Model codes as broadcast in the first service data byte (high bit cleared)."""
    BUTTON = 0x42
    FAN_ADD = 0x46
    BOT = 0x48
    HUB_ADD = 0x4C
    HUB_MINI_ADD = 0x4D
    HUB_PLUS_ADD = 0x50
    METER = 0x54
    CURTAIN = 0x63
    CONTACT_SENSOR = 0x64
    HUMIDIFIER = 0x65
    FAN = 0x66
    PLUG_MINI_US = 0x67
    METER_PLUS = 0x69
    PLUG_MINI_JP = 0x6A
    HUB = 0x6C
    HUB_MINI = 0x6D
    SMART_LOCK = 0x6F
    HUB_PLUS = 0x70
    LED_STRIP_LIGHT = 0x72
    MOTION_SENSOR = 0x73
    METER_ADD = 0x74
    COLOR_BULB = 0x75

    @property
    def family(self) -> Optional[DeviceFamily]:
        return MODEL_FAMILIES.get(self)

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES.get(self, self.name.replace("_", " ").title())

    @property
    def decodable(self) -> bool:
        return self.family is not None

    @classmethod
    def from_name(cls, name: str) -> "DeviceModel":
        key = name.strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise UnknownDeviceModelError(f"Unknown SwitchBot device model: {name!r}") from None


# Models whose advertisements carry a reading the decoder can extract.
MODEL_FAMILIES: dict[DeviceModel, DeviceFamily] = {
    DeviceModel.BOT: DeviceFamily.BOT,
    DeviceModel.METER: DeviceFamily.METER,
    DeviceModel.METER_PLUS: DeviceFamily.METER,
    DeviceModel.HUMIDIFIER: DeviceFamily.HUMIDIFIER,
    DeviceModel.PLUG_MINI_US: DeviceFamily.PLUG,
    DeviceModel.PLUG_MINI_JP: DeviceFamily.PLUG,
}

DISPLAY_NAMES: dict[DeviceModel, str] = {
    DeviceModel.BUTTON: "Button",
    DeviceModel.FAN_ADD: "Fan (pairing)",
    DeviceModel.BOT: "Bot",
    DeviceModel.HUB_ADD: "Hub (pairing)",
    DeviceModel.HUB_MINI_ADD: "Hub Mini (pairing)",
    DeviceModel.HUB_PLUS_ADD: "Hub Plus (pairing)",
    DeviceModel.METER: "Meter",
    DeviceModel.CURTAIN: "Curtain",
    DeviceModel.CONTACT_SENSOR: "Contact Sensor",
    DeviceModel.HUMIDIFIER: "Humidifier",
    DeviceModel.FAN: "Fan",
    DeviceModel.PLUG_MINI_US: "Plug Mini (US)",
    DeviceModel.METER_PLUS: "Meter Plus",
    DeviceModel.PLUG_MINI_JP: "Plug Mini (JP)",
    DeviceModel.HUB: "Hub",
    DeviceModel.HUB_MINI: "Hub Mini",
    DeviceModel.SMART_LOCK: "Smart Lock",
    DeviceModel.HUB_PLUS: "Hub Plus",
    DeviceModel.LED_STRIP_LIGHT: "LED Strip Light",
    DeviceModel.MOTION_SENSOR: "Motion Sensor",
    DeviceModel.METER_ADD: "Meter (pairing)",
    DeviceModel.COLOR_BULB: "Color Bulb",
}


@dataclass(frozen=True)
class DeviceInfo:
    """
    Metadata for a single SwitchBot model code.

    Attributes:
        code: The 7-bit model code from the service data.
        model: The matching ``DeviceModel`` member.
        name: Machine-readable snake_case name.
        display_name: Human-readable display name.
        family: The reading family, or ``None`` if the model has no decodable reading.
    """
    code: int
    model: DeviceModel
    name: str
    display_name: str
    family: Optional[DeviceFamily]


def _build_catalog() -> dict[int, DeviceInfo]:
    """Build the full catalog of DeviceInfo objects."""
    catalog: dict[int, DeviceInfo] = {}
    for model in DeviceModel:
        catalog[model.value] = DeviceInfo(
            code=model.value,
            model=model,
            name=model.name.lower(),
            display_name=model.display_name,
            family=model.family,
        )
    return catalog


class DeviceCatalog:
    """
    Read-only catalog of all known SwitchBot model codes.

    Provides lookup by code, snake_case name, and reading family.
    """

    def __init__(self) -> None:
        self._by_code: dict[int, DeviceInfo] = _build_catalog()
        self._by_name: dict[str, DeviceInfo] = {
            info.name: info for info in self._by_code.values()
        }

    def get_by_code(self, code: int) -> Optional[DeviceInfo]:
        """
        Look up a model by its code. The high bit is ignored, as on the air.

        Args:
            code: The first service data byte.

        Returns:
            The ``DeviceInfo`` if found, otherwise ``None``.
        """
        return self._by_code.get(code & 0x7F)

    def get_by_name(self, name: str) -> Optional[DeviceInfo]:
        return self._by_name.get(name.lower().strip())

    def list_family(self, family: DeviceFamily) -> list[DeviceInfo]:
        """Return all models decoding into ``family``, sorted by code."""
        return sorted(
            (d for d in self._by_code.values() if d.family == family),
            key=lambda d: d.code,
        )

    def all(self) -> list[DeviceInfo]:
        return sorted(self._by_code.values(), key=lambda d: d.code)

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, item: int | str) -> bool:
        if isinstance(item, int):
            return (item & 0x7F) in self._by_code
        return item in self._by_name
