"""Bluetooth hardware address helpers."""

from __future__ import annotations

from typing import Union

from apple_ble.constants import DEVICE_ADDRESS_SIZE

AddressLike = Union[bytes, bytearray, str]


def parse_address(address: AddressLike) -> bytes:
    """Normalize ``AA:BB:CC:DD:EE:FF`` or raw bytes to 6 address bytes."""
    if isinstance(address, str):
        parts = address.replace("-", ":").split(":")
        if len(parts) != DEVICE_ADDRESS_SIZE or not all(len(p) == 2 for p in parts):
            raise ValueError(f"Invalid device address: {address!r}")
        return bytes(int(p, 16) for p in parts)
    if len(address) != DEVICE_ADDRESS_SIZE:
        raise ValueError(f"Device address must be {DEVICE_ADDRESS_SIZE} bytes, got {len(address)}")
    return bytes(address)


def format_address(address: bytes | bytearray) -> str:
    return ":".join(f"{b:02X}" for b in parse_address(address))
