"""
Decoder for SwitchBot BLE advertisement data.

The device model is carried in the first byte of the service data field in
SCAN_RSP, and the location of the reading depends on that model: most families
pack it into the service data, while the Plug Mini family uses manufacturer
data instead.

A recognised model byte does NOT prove the packet came from a SwitchBot device.
The length checks below cut down on false positives from other advertisers but
are not conclusive either. For certainty, connect to the device and confirm it
offers the primary SwitchBot service before relying on the values.

Some models advertise under Nordic's manufacturer ID (0x0059) rather than Woan
Technology's (0x0969). The model byte tells the caller which one to read.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Tuple, Union

from switchbot_adv.config import get_settings
from switchbot_adv.constants import (
    BOT_SERVICE_DATA_LENGTH,
    HUMIDIFIER_SERVICE_DATA_LENGTH,
    METER_SERVICE_DATA_LENGTH,
    MIN_SERVICE_DATA_LENGTH,
    PLUG_MANUFACTURER_DATA_LENGTH,
)
from switchbot_adv.core.binary import get_bit, high_bit, low7, low_nibble
from switchbot_adv.diagnostics import get_decoder_logger
from switchbot_adv.domain.models import DeviceFamily, DeviceModel
from switchbot_adv.parsing.classify import classify
from switchbot_adv.parsing.readings import (
    BotReading,
    HumidifierReading,
    MeterReading,
    PlugReading,
    Reading,
)

BufferLike = Union[bytes, bytearray, memoryview, Sequence[int]]


@dataclass
class DecodeResult:
    """
    Outcome of decoding one advertisement.

    Attributes:
        classified: What the model byte classified as, even if decoding was rejected.
        model: The decoded model; only set together with ``reading``.
        reading: The decoded reading, or ``None`` if the packet was rejected.
        warnings: Notes explaining why a recognised model was rejected.
    """
    classified: Optional[DeviceModel] = None
    model: Optional[DeviceModel] = None
    reading: Optional[Reading] = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.reading is not None

    def as_tuple(self) -> Tuple[Optional[DeviceModel], Optional[Reading]]:
        return self.model, self.reading


def _reject(model: DeviceModel, warnings: list[str], message: str, **details) -> None:
    warnings.append(message)
    # Misconfigured diagnostics must not turn a rejection into a raise.
    try:
        if not get_settings().log_rejections:
            return
        logger = get_decoder_logger()
    except ValueError:
        return
    logger.info(message, extra={"details": {"model": model.name, **details}})


def _check_length(
    model: DeviceModel,
    data: BufferLike,
    expected: int,
    warnings: list[str],
    source: str = "service",
) -> bool:
    if len(data) == expected:
        return True
    _reject(
        model,
        warnings,
        f"{model.family.value} {source} data length invalid: {len(data)}",
        expected=expected,
        actual=len(data),
    )
    return False


def _decode_bot(
    model: DeviceModel,
    service_data: BufferLike,
    manufacturer_data: Optional[BufferLike],
    warnings: list[str],
) -> Optional[Reading]:
    if not _check_length(model, service_data, BOT_SERVICE_DATA_LENGTH, warnings):
        return None
    return BotReading(
        battery=low7(service_data[2]),
        state=get_bit(service_data[1], 6),
    )


def _decode_meter(
    model: DeviceModel,
    service_data: BufferLike,
    manufacturer_data: Optional[BufferLike],
    warnings: list[str],
) -> Optional[Reading]:
    if not _check_length(model, service_data, METER_SERVICE_DATA_LENGTH, warnings):
        return None
    # MSB of byte 4 set means above zero.
    sign = 1 if high_bit(service_data[4]) else -1
    # The tenths nibble is integer-divided, so it only contributes for values 10..15.
    temperature = sign * (low7(service_data[4]) + low_nibble(service_data[3]) // 10)
    return MeterReading(
        battery=low7(service_data[2]),
        temperature=temperature,
        humidity=low7(service_data[5]),
    )


def _decode_humidifier(
    model: DeviceModel,
    service_data: BufferLike,
    manufacturer_data: Optional[BufferLike],
    warnings: list[str],
) -> Optional[Reading]:
    if not _check_length(model, service_data, HUMIDIFIER_SERVICE_DATA_LENGTH, warnings):
        return None
    # Byte 4 packs the auto mode flag and the humidity level together.
    setting = service_data[4]
    return HumidifierReading(
        state=high_bit(service_data[1]),
        humidity=low7(setting),
        auto_mode=high_bit(setting),
    )


def _decode_plug(
    model: DeviceModel,
    service_data: BufferLike,
    manufacturer_data: Optional[BufferLike],
    warnings: list[str],
) -> Optional[Reading]:
    if manufacturer_data is None:
        _reject(model, warnings, "plug manufacturer data missing")
        return None
    if not _check_length(model, manufacturer_data, PLUG_MANUFACTURER_DATA_LENGTH, warnings, source="manufacturer"):
        return None
    load = manufacturer_data[10]
    deciwatts = (low7(load) << 8) + manufacturer_data[11]
    return PlugReading(
        wifi_rssi=-manufacturer_data[9],
        state=manufacturer_data[7] == 0x80,
        watts=deciwatts // 10,
        overload=high_bit(load),
    )


_FAMILY_DECODERS: dict[
    DeviceFamily,
    Callable[[DeviceModel, BufferLike, Optional[BufferLike], list[str]], Optional[Reading]],
] = {
    DeviceFamily.BOT: _decode_bot,
    DeviceFamily.METER: _decode_meter,
    DeviceFamily.HUMIDIFIER: _decode_humidifier,
    DeviceFamily.PLUG: _decode_plug,
}


def inspect_advertisement(
    service_data: BufferLike,
    manufacturer_data: Optional[BufferLike] = None,
) -> DecodeResult:
    """
    Decode an advertisement and keep the reasons for any rejection.

    Args:
        service_data: The service data field from SCAN_RSP, as broadcast.
        manufacturer_data: The manufacturer data for the model's company ID,
            including the two leading ID bytes. Only the Plug Mini family uses it.

    Returns:
        A ``DecodeResult``. ``model`` and ``reading`` are either both set or both ``None``.
    """
    result = DecodeResult()

    # No SwitchBot device sends less than this, so shorter buffers are foreign.
    if len(service_data) < MIN_SERVICE_DATA_LENGTH:
        return result

    model = classify(service_data[0])
    if model is None:
        return result
    result.classified = model

    if model.family is None:
        result.warnings.append(f"no reading layout for {model.name}")
        return result

    reading = _FAMILY_DECODERS[model.family](model, service_data, manufacturer_data, result.warnings)
    if reading is not None:
        result.model = model
        result.reading = reading
    return result


def decode(
    service_data: BufferLike,
    manufacturer_data: Optional[BufferLike] = None,
) -> Tuple[Optional[DeviceModel], Optional[Reading]]:
    """
    Decode BLE advertisement data from a SwitchBot device.

    Only the Bot, Meter, Humidifier and Plug Mini families produce a reading.
    Anything else, including a recognised model whose buffer has the wrong
    length, comes back as ``(None, None)``. This function never raises on
    malformed input.

    Rejections of a recognised model are logged on the ``switchbot_adv.decode``
    logger, which keeps a ring buffer (see ``get_diagnostics``) and also
    propagates to the host application's handlers.

    Args:
        service_data: The service data field from SCAN_RSP, as broadcast.
        manufacturer_data: The manufacturer data for the model's company ID,
            including the two leading ID bytes, if the caller has it.

    Returns:
        A ``(model, reading)`` pair.
    """
    return inspect_advertisement(service_data, manufacturer_data).as_tuple()
