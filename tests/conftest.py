"""Shared fixtures: an in-memory advertising transport."""

from __future__ import annotations

from typing import Any, Optional

import pytest

from apple_ble import AdvertisementEnvelope


class FakeTransport:
    """Records every call made by the assembler; optionally fails one operation."""

    def __init__(self, name: str = "test-adapter", fail: Optional[str] = None) -> None:
        self.name = name
        self.fail = fail
        self.calls: list[str] = []
        self.broadcasts: dict[int, AdvertisementEnvelope] = {}
        self.address: Optional[bytes] = None
        self._next_handle = 1

    def _maybe_fail(self, operation: str) -> None:
        self.calls.append(operation)
        if self.fail == operation:
            raise RuntimeError(f"{operation} failed")

    async def begin_broadcast(self, envelope: AdvertisementEnvelope) -> int:
        self._maybe_fail("begin_broadcast")
        handle = self._next_handle
        self._next_handle += 1
        self.broadcasts[handle] = envelope
        return handle

    async def stop_broadcast(self, handle: Any) -> None:
        self._maybe_fail("stop_broadcast")
        del self.broadcasts[handle]

    def local_device_name(self) -> str:
        self._maybe_fail("local_device_name")
        return self.name

    async def set_local_device_address(self, address: bytes) -> None:
        self._maybe_fail("set_local_device_address")
        self.address = address


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
