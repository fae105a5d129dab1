"""
Domain models for the switchbot_adv library: the closed set of SwitchBot
model codes, their reading families, and a catalog for looking them up.
"""
from switchbot_adv.domain.models import (
    DeviceCatalog,
    DeviceFamily,
    DeviceInfo,
    DeviceModel,
    UnknownDeviceModelError,
)

__all__ = ["DeviceCatalog", "DeviceFamily", "DeviceInfo", "DeviceModel", "UnknownDeviceModelError"]
