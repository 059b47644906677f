"""Advertisement assembly and registration against a transport."""

from __future__ import annotations

import logging
from typing import Any, Optional

from apple_ble.address import format_address
from apple_ble.codec import KindLike, encode, message_type_for
from apple_ble.config import AdvertisingSettings
from apple_ble.envelope import AdvertisementEnvelope, AdvertisementType
from apple_ble.errors import TransportError, ValidationRejectedError
from apple_ble.messages import FindMyMessage, Message
from apple_ble.transport import AdvertisingTransport

logger = logging.getLogger(__name__)


async def override_device_address(transport: AdvertisingTransport, message: FindMyMessage) -> None:
    """Ask the transport to adopt the first 6 bytes of the FindMy public key as device address."""
    address = message.device_address
    logger.debug("Overriding device address with %s", format_address(address))
    try:
        await transport.set_local_device_address(address)
    except Exception as e:
        logger.error("Failed to set device address %s: %s", format_address(address), e)
        raise TransportError("set the local device address", e) from e


class AdvertisementAssembler:
    """Builds advertisement envelopes and registers them with a transport."""

    def __init__(self, transport: AdvertisingTransport, settings: Optional[AdvertisingSettings] = None) -> None:
        self.transport = transport
        self.settings = settings or AdvertisingSettings()

    def build_envelope(self, payload: bytes) -> AdvertisementEnvelope:
        local_name = None
        if self.settings.include_local_name:
            try:
                local_name = self.transport.local_device_name()
            except Exception as e:
                raise TransportError("read the local device name", e) from e
        return AdvertisementEnvelope(
            advertisement_type=AdvertisementType.BROADCAST,
            local_name=local_name,
            min_interval=self.settings.min_interval,
            max_interval=self.settings.max_interval,
            timeout=self.settings.timeout,
            manufacturer_data={self.settings.vendor_id: payload},
        )

    async def assemble(self, message: Message) -> AdvertisementEnvelope:
        """Encode ``message`` and wrap it in an envelope.

        FindMy messages first move the local device address to the key's
        leading bytes; the envelope is only built once that succeeded.
        """
        payload = encode(message)
        if isinstance(message, FindMyMessage):
            await override_device_address(self.transport, message)
        envelope = self.build_envelope(payload)
        logger.debug("Assembled %s envelope for vendor 0x%04X", message.kind.value, envelope.vendor_id)
        return envelope

    async def register(self, kind: KindLike, message: Message) -> Any:
        """Validate, encode and broadcast ``message``. Returns the transport's handle."""
        model_type = message_type_for(kind)
        if not isinstance(message, model_type):
            raise ValidationRejectedError(
                f"Expected a {model_type.__name__} record, got {type(message).__name__}"
            )
        envelope = await self.assemble(message)
        try:
            handle = await self.transport.begin_broadcast(envelope)
        except Exception as e:
            logger.error("Failed to begin broadcasting %s message: %s", message.kind.value, e)
            raise TransportError("begin broadcasting", e) from e
        logger.info("Broadcasting %s message", message.kind.value)
        return handle

    async def unregister(self, handle: Any) -> None:
        try:
            await self.transport.stop_broadcast(handle)
        except Exception as e:
            logger.error("Failed to stop broadcast: %s", e)
            raise TransportError("stop broadcasting", e) from e
