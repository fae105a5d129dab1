from __future__ import annotations

from typing import Optional

from switchbot_adv.core.binary import low7
from switchbot_adv.domain.models import DeviceModel

_MODELS_BY_CODE: dict[int, DeviceModel] = {model.value: model for model in DeviceModel}


def classify(data: int) -> Optional[DeviceModel]:
    """
    Map the first service data byte of a SCAN_RSP packet to a device model.

    The high bit is ignored. Returning a model does NOT mean the packet came
    from a SwitchBot device: a single byte has only 256 values, so other
    advertisers collide with known codes. Callers that need certainty should
    connect and look for the primary SwitchBot service UUID.

    Args:
        data: The first byte of the service data field.

    Returns:
        The matching ``DeviceModel``, or ``None`` if the code is unknown.
    """
    return _MODELS_BY_CODE.get(low7(data))
