"""Hash helpers: SM3, RIPEMD-160 and HMAC-SHA512."""

from __future__ import annotations

import hashlib
import hmac

from Crypto.Hash import RIPEMD160

from gmcrypt.sm3 import sm3_sum


def hash_using_sm3(data: bytes) -> bytes:
    """Return the 32-byte SM3 digest of ``data``."""
    return sm3_sum(data)


def hash_using_ripemd160(data: bytes) -> bytes:
    """Return the 20-byte RIPEMD-160 digest of ``data``."""
    return RIPEMD160.new(bytes(data)).digest()


def hash_using_hmac512(seed: bytes, key: bytes) -> bytes:
    """Return HMAC-SHA512 of ``seed`` under ``key``."""
    return hmac.new(bytes(key), bytes(seed), hashlib.sha512).digest()