"""The advertising transport boundary.

The radio itself (adapter session, broadcast scheduling, address changes
and the privileges those need) lives behind this protocol. This package
ships no backend; integrators provide one, e.g. on top of BlueZ.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from apple_ble.envelope import AdvertisementEnvelope


@runtime_checkable
class AdvertisingTransport(Protocol):
    async def begin_broadcast(self, envelope: AdvertisementEnvelope) -> Any:
        """Start broadcasting ``envelope``; returns an opaque handle."""
        ...

    async def stop_broadcast(self, handle: Any) -> None:
        ...

    def local_device_name(self) -> str:
        ...

    async def set_local_device_address(self, address: bytes) -> None:
        """Make the local radio use ``address`` (6 bytes) as its hardware address."""
        ...
