"""
Published identifiers for SwitchBot (Woan Technology) devices.

These are consumed by the caller's BLE stack to locate the right advertisement
fields before handing them to the decoder. The decoder itself never interprets
the UUIDs.
"""

# Woan Technology's registered Bluetooth SIG company identifier.
SWITCHBOT_WOAN_MANUFACTURER_ID: int = 0x0969
# Some models broadcast under Nordic Semiconductor's identifier instead.
SWITCHBOT_NORDIC_MANUFACTURER_ID: int = 0x0059

SWITCHBOT_SERV_UUID_PRIMARY = "cba20d00-224d-11e6-9fb8-0002a5d5c51b"
SWITCHBOT_SERV_UUID_WOAN_TECHNOLOGY = "00000d00-0000-1000-8000-00805f9b34fb"
SWITCHBOT_SERV_UUID_WOAN_TECHNOLOGY2 = "0000fd3d-0000-1000-8000-00805f9b34fb"

SWITCHBOT_CHAR_UUID_WRITE = "cba20002-224d-11e6-9fb8-0002a5d5c51b"
SWITCHBOT_CHAR_UUID_NOTIFY = "cba20003-224d-11e6-9fb8-0002a5d5c51b"

# No SwitchBot device sends SCAN_RSP service data shorter than this.
MIN_SERVICE_DATA_LENGTH = 3

BOT_SERVICE_DATA_LENGTH = 3
METER_SERVICE_DATA_LENGTH = 6
HUMIDIFIER_SERVICE_DATA_LENGTH = 5
# Includes the two manufacturer ID bytes that most BLE stacks use as a map key.
PLUG_MANUFACTURER_DATA_LENGTH = 12
