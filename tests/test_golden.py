"""Golden byte vectors for every message kind."""

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


# ── Golden byte vectors ──────────────────────────────────────────────

AIRPLAY_TARGET_LOOPBACK = bytes([0x09, 0x06, 0x03, 0x07, 0x7F, 0x00, 0x00, 0x01])

AIRPRINT_LOOPBACK = bytes(
    [
        0x03, 0x16, 0x74, 0x07, 0x6F, 0xF0, 0x0D, 0x00,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0xFF,
    ]
)

FINDMY_ALL_88 = bytes([0x12, 0x19, 0x00]) + bytes([0x88] * 22) + bytes([0x02])

# sha256("") starts with e3 b0
AIRDROP_EMPTY_IDENTIFIERS = bytes(
    [
        0x05, 0x12, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x01, 0xE3, 0xB0, 0xE3, 0xB0, 0xE3,
        0xB0, 0xE3, 0xB0,
    ]
)

AIRPLAY_SOURCE = bytes([0x0A, 0x01, 0x00])


# ── Tests ─────────────────────────────────────────────────────────────


def test_airplay_target_matches_expected_wire_bytes():
    data = encode(AirPlayTargetMessage(ip_address=IPv4Address("127.0.0.1")))
    assert data == AIRPLAY_TARGET_LOOPBACK, _diff(AIRPLAY_TARGET_LOOPBACK, data)


def test_airplay_target_decode():
    msg = decode(AIRPLAY_TARGET_LOOPBACK, AirPlayTargetMessage)
    assert msg.ip_address == IPv4Address("127.0.0.1")


def test_airprint_matches_expected_wire_bytes():
    msg = AirPrintMessage(port=0xF00D, ip_address=IPv6Address("::1"), power=0xFF)
    data = encode(msg)
    assert data == AIRPRINT_LOOPBACK, _diff(AIRPRINT_LOOPBACK, data)


def test_airprint_decode():
    msg = decode(AIRPRINT_LOOPBACK, AirPrintMessage)
    assert msg.port == 0xF00D
    assert msg.ip_address == IPv6Address("::1")
    assert msg.power == 0xFF


def test_findmy_matches_expected_wire_bytes():
    data = encode(FindMyMessage(public_key=bytes([0x88] * 28)))
    assert data == FINDMY_ALL_88, _diff(FINDMY_ALL_88, data)


def test_findmy_decode_with_device_address():
    msg = decode(FINDMY_ALL_88, FindMyMessage, address=bytes([0x88] * 6))
    assert msg.public_key == bytes([0x88] * 28)


def test_airdrop_empty_identifiers_match_expected_wire_bytes():
    data = encode(AirDropMessage.from_identifiers())
    assert data == AIRDROP_EMPTY_IDENTIFIERS, _diff(AIRDROP_EMPTY_IDENTIFIERS, data)


def test_airplay_source_is_constant():
    data = encode(AirPlaySourceMessage())
    assert data == AIRPLAY_SOURCE, _diff(AIRPLAY_SOURCE, data)


# ── Helpers ───────────────────────────────────────────────────────────


def _diff(expected: bytes, actual: bytes) -> str:
    lines = ["Byte mismatch:"]
    max_len = max(len(expected), len(actual))
    for i in range(max_len):
        e = f"0x{expected[i]:02X}" if i < len(expected) else "---"
        a = f"0x{actual[i]:02X}" if i < len(actual) else "---"
        marker = " <<" if e != a else ""
        lines.append(f"  [{i:3d}] expected={e}  actual={a}{marker}")
    lines.append(f"  expected len={len(expected)}, actual len={len(actual)}")
    return "\n".join(lines)
