"""Basic example: encode every continuity message kind and decode it back.

Prints the wire bytes that would go into the Apple manufacturer-data entry.
"""

from ipaddress import IPv4Address, IPv6Address

from apple_ble import (
    AirDropMessage,
    AirPlaySourceMessage,
    AirPlayTargetMessage,
    AirPrintMessage,
    FindMyMessage,
    decode,
    encode,
)


def hex_dump(data: bytes, label: str = "") -> None:
    if label:
        print(f"\n  {label}")
    for i in range(0, len(data), 8):
        chunk = data[i : i + 8]
        hex_str = " ".join(f"{b:02X}" for b in chunk)
        print(f"    [{i:3d}] {hex_str}")


def main() -> None:
    print("=== Continuity messages ===")

    airdrop = AirDropMessage.from_identifiers(apple_id="john.doe@example.com", phone="+15552368")
    airprint = AirPrintMessage(port=0xF00D, ip_address=IPv6Address("::1"), power=0xFF)
    findmy = FindMyMessage(public_key=bytes([0x88] * 28))

    for message in (
        airdrop,
        AirPlaySourceMessage(),
        AirPlayTargetMessage(ip_address=IPv4Address("127.0.0.1")),
        airprint,
        findmy,
    ):
        data = encode(message)
        hex_dump(data, f"{message.kind.value} ({len(data)} bytes)")

        address = findmy.device_address if isinstance(message, FindMyMessage) else None
        decoded = decode(data, message.kind, address=address)
        assert decoded == message
        print(f"    decoded: {decoded!r}")


if __name__ == "__main__":
    main()
