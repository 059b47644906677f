"""Wire format constants."""

from datetime import timedelta
from enum import IntEnum

APPLE_COMPANY_ID = 0x004C  # Bluetooth SIG company identifier for Apple Inc.
DEVICE_ADDRESS_SIZE = 6
PUBLIC_KEY_SIZE = 28
TOKEN_SIZE = 2

DEFAULT_MIN_INTERVAL = timedelta(milliseconds=100)
DEFAULT_MAX_INTERVAL = timedelta(milliseconds=200)
DEFAULT_TIMEOUT = timedelta(0)  # advertise until explicitly stopped


class MessageType(IntEnum):
    """First byte of every continuity message."""

    AIRPRINT = 0x03
    AIRDROP = 0x05
    AIRPLAY_TARGET = 0x09
    AIRPLAY_SOURCE = 0x0A
    FINDMY = 0x12
