from switchbot_adv.constants import (
    SWITCHBOT_CHAR_UUID_NOTIFY,
    SWITCHBOT_CHAR_UUID_WRITE,
    SWITCHBOT_NORDIC_MANUFACTURER_ID,
    SWITCHBOT_SERV_UUID_PRIMARY,
    SWITCHBOT_SERV_UUID_WOAN_TECHNOLOGY,
    SWITCHBOT_SERV_UUID_WOAN_TECHNOLOGY2,
    SWITCHBOT_WOAN_MANUFACTURER_ID,
)
from switchbot_adv.config import DecoderSettings
from switchbot_adv.domain import DeviceCatalog, DeviceFamily, DeviceModel
from switchbot_adv.parsing import (
    BotReading,
    DecodeResult,
    HumidifierReading,
    MeterReading,
    PlugReading,
    Reading,
    classify,
    decode,
    inspect_advertisement,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "decode",
    "classify",
    "inspect_advertisement",
    "DecodeResult",
    "DeviceModel",
    "DeviceFamily",
    "DeviceCatalog",
    "Reading",
    "BotReading",
    "MeterReading",
    "HumidifierReading",
    "PlugReading",
    "DecoderSettings",
    "SWITCHBOT_WOAN_MANUFACTURER_ID",
    "SWITCHBOT_NORDIC_MANUFACTURER_ID",
    "SWITCHBOT_SERV_UUID_PRIMARY",
    "SWITCHBOT_SERV_UUID_WOAN_TECHNOLOGY",
    "SWITCHBOT_SERV_UUID_WOAN_TECHNOLOGY2",
    "SWITCHBOT_CHAR_UUID_WRITE",
    "SWITCHBOT_CHAR_UUID_NOTIFY",
]

try:
    __version__ = version("switchbot-adv")
except PackageNotFoundError:
    __version__ = "0.0.0"
