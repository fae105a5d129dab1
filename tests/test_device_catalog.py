"""Tests for the device model catalog."""
import pytest

from switchbot_adv.domain.models import (
    DeviceCatalog,
    DeviceFamily,
    DeviceInfo,
    DeviceModel,
    UnknownDeviceModelError,
)


@pytest.fixture
def catalog():
    return DeviceCatalog()


def test_catalog_covers_every_model(catalog):
    assert len(catalog) == len(DeviceModel)


def test_get_by_code(catalog):
    info = catalog.get_by_code(0x48)
    assert isinstance(info, DeviceInfo)
    assert info.model is DeviceModel.BOT
    assert info.name == "bot"
    assert info.display_name == "Bot"
    assert info.family is DeviceFamily.BOT


def test_get_by_code_ignores_high_bit(catalog):
    assert catalog.get_by_code(0xE9).model is DeviceModel.METER_PLUS


def test_get_by_code_unknown(catalog):
    assert catalog.get_by_code(0x00) is None


def test_get_by_name(catalog):
    assert catalog.get_by_name("Plug_Mini_JP").code == 0x6A
    assert catalog.get_by_name("nonexistent") is None


def test_list_family(catalog):
    meters = catalog.list_family(DeviceFamily.METER)
    assert [m.model for m in meters] == [DeviceModel.METER, DeviceModel.METER_PLUS]
    plugs = catalog.list_family(DeviceFamily.PLUG)
    assert [p.code for p in plugs] == [0x67, 0x6A]


def test_all_sorted_by_code(catalog):
    codes = [info.code for info in catalog.all()]
    assert codes == sorted(codes)


def test_contains(catalog):
    assert 0x65 in catalog
    assert 0xE5 in catalog
    assert "humidifier" in catalog
    assert 0x01 not in catalog
    assert "toaster" not in catalog


def test_only_four_families_decodable():
    decodable = {m for m in DeviceModel if m.decodable}
    assert decodable == {
        DeviceModel.BOT,
        DeviceModel.METER,
        DeviceModel.METER_PLUS,
        DeviceModel.HUMIDIFIER,
        DeviceModel.PLUG_MINI_US,
        DeviceModel.PLUG_MINI_JP,
    }
    assert DeviceModel.CURTAIN.family is None


def test_from_name():
    assert DeviceModel.from_name("meter plus") is DeviceModel.METER_PLUS
    assert DeviceModel.from_name("led-strip-light") is DeviceModel.LED_STRIP_LIGHT


def test_from_name_unknown():
    with pytest.raises(UnknownDeviceModelError):
        DeviceModel.from_name("toaster")


def test_display_name():
    assert DeviceModel.PLUG_MINI_US.display_name == "Plug Mini (US)"
