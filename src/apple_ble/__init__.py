"""Apple continuity BLE advertisement messages: codec and advertisement assembly."""

from apple_ble.address import format_address, parse_address
from apple_ble.assembler import AdvertisementAssembler, override_device_address
from apple_ble.codec import decode, encode, message_type_for, parse_manufacturer_data
from apple_ble.config import AdvertisingSettings
from apple_ble.constants import APPLE_COMPANY_ID, MessageType
from apple_ble.envelope import AdvertisementEnvelope, AdvertisementType
from apple_ble.errors import (
    AppleBleError,
    TransportError,
    TruncatedInputError,
    ValidationRejectedError,
)
from apple_ble.messages import (
    AirDropMessage,
    AirPlaySourceMessage,
    AirPlayTargetMessage,
    AirPrintMessage,
    FindMyMessage,
    Message,
    MessageKind,
)
from apple_ble.tokens import identifier_token
from apple_ble.transport import AdvertisingTransport

__version__ = "0.2.1"

__all__ = [
    "encode",
    "decode",
    "parse_manufacturer_data",
    "message_type_for",
    "identifier_token",
    "AdvertisementAssembler",
    "override_device_address",
    "AdvertisingSettings",
    "AdvertisementEnvelope",
    "AdvertisementType",
    "AdvertisingTransport",
    "Message",
    "MessageKind",
    "MessageType",
    "AirDropMessage",
    "AirPlaySourceMessage",
    "AirPlayTargetMessage",
    "AirPrintMessage",
    "FindMyMessage",
    "AppleBleError",
    "TruncatedInputError",
    "ValidationRejectedError",
    "TransportError",
    "APPLE_COMPANY_ID",
    "format_address",
    "parse_address",
    "__version__",
]
