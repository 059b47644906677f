"""Identifier token derivation.

A token is the first two bytes of a one-way digest of some identifier
(an Apple ID, phone number or email address). It hints at possession of
the identifier without transmitting it.
"""

from __future__ import annotations

import hashlib
from typing import Callable, Optional

from apple_ble.constants import TOKEN_SIZE


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def identifier_token(
    value: Optional[str],
    digest: Callable[[bytes], bytes] = sha256_digest,
) -> bytes:
    """Derive the 2-byte token for ``value``; ``None`` hashes as the empty string."""
    return digest((value or "").encode("utf-8"))[:TOKEN_SIZE]
