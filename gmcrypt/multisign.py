"""Schnorr-style multi-signatures where all signers share one aggregate key.

Signing works as follows:

1. Every signer i holds a key pair (x_i, P_i) and draws a random k_i.
2. R = k_1*G + ... + k_n*G.
3. The shared public key is C = P_1 + ... + P_n.
4. Every signer computes s_i = k_i + SM3(C || R || m) * x_i.
5. The signature is (S, R) with S = s_1 + ... + s_n.

Verification checks that S*G - SM3(C || R || m)*C equals R.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Sequence

from gmcrypt.curve import Curve, Point, PrivateKey, PublicKey
from gmcrypt.entropy import (
    KEY_LENGTH_INT32,
    KeyStrength,
    generate_seed_with_strength_and_key_len,
)
from gmcrypt.envelope import SigType, marshal_xuper_signature
from gmcrypt.hashing import hash_using_sm3

MINIMUM_PARTICIPANT = 2

_INVALID_INPUT = "Invalid input params"
_NOT_SAME_CURVE = "The private keys of all the keys are not using the the same curve"
_TOO_FEW_KEYS = "The total num of keys should be greater than one"
_EMPTY_MESSAGE = "Message to be sign should not be nil"
_INVALID_SIGNATURE = "Signature is invalid"


class MultiSignError(ValueError):
    """Invalid input for creating or verifying a multi-signature."""


def _int_bytes(value: int) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def _same_curve(keys: Sequence[PublicKey | PrivateKey]) -> bool:
    curve = keys[0].curve
    return all(key.curve == curve for key in keys)


def _challenge(c: bytes, r: bytes, message: bytes) -> int:
    return int.from_bytes(hash_using_sm3(bytes(c) + bytes(r) + bytes(message)), "big")


def _sum_points(curve: Curve, points: Sequence[Point]) -> Point:
    total: Point = (0, 0)
    for x, y in points:
        total = curve.add(x, y, *total)
    return total


def _shared_key(keys: Sequence[PublicKey | PrivateKey]) -> bytes:
    if any(key is None for key in keys):
        raise MultiSignError(_INVALID_INPUT)
    curve = keys[0].curve
    return curve.marshal(*_sum_points(curve, [(key.x, key.y) for key in keys]))


def _encode_content(s: bytes, r: bytes) -> bytes:
    content = {
        "S": base64.b64encode(bytes(s)).decode("ascii"),
        "R": base64.b64encode(bytes(r)).decode("ascii"),
    }
    return json.dumps(content, separators=(",", ":")).encode("utf-8")


def _decode_content(data: bytes) -> tuple[bytes, bytes]:
    try:
        decoded = json.loads(bytes(data).decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise MultiSignError(f"Failed unmashalling multi signature [{exc}]") from exc
    if not isinstance(decoded, dict):
        raise MultiSignError("Failed unmashalling multi signature [not an object]")
    values = []
    for name in ("S", "R"):
        raw = decoded.get(name)
        if raw is None:
            values.append(b"")
            continue
        if not isinstance(raw, str):
            raise MultiSignError(
                f"Failed unmashalling multi signature [invalid field {name}]"
            )
        try:
            values.append(base64.b64decode(raw, validate=True))
        except (binascii.Error, ValueError) as exc:
            raise MultiSignError(
                f"Failed unmashalling multi signature [{exc}]"
            ) from exc
    return values[0], values[1]


def get_random_32_bytes() -> bytes:
    """Return a fresh 32-byte random nonce k_i."""
    return generate_seed_with_strength_and_key_len(KeyStrength.HARD, KEY_LENGTH_INT32)


def get_ri_using_random_bytes(key: PublicKey | PrivateKey, k: bytes) -> bytes:
    """Return R_i = k_i*G, encoded as an uncompressed point."""
    curve = key.curve
    return curve.marshal(*curve.scalar_base_mult(bytes(k)))


def get_r_using_all_ri(key: PublicKey | PrivateKey, array_of_ri: Sequence[bytes]) -> bytes:
    """Return R = R_1 + ... + R_n, encoded as an uncompressed point."""
    curve = key.curve
    try:
        points = [curve.unmarshal(ri) for ri in array_of_ri]
    except ValueError as exc:
        raise MultiSignError(f"{_INVALID_INPUT}: {exc}") from exc
    return curve.marshal(*_sum_points(curve, points))


def get_si_using_kcrm(
    key: PrivateKey, k: bytes, c: bytes, r: bytes, message: bytes
) -> bytes:
    """Return s_i = k_i + SM3(C || R || m) * x_i as big-endian bytes."""
    e = _challenge(c, r, message)
    return _int_bytes(int.from_bytes(bytes(k), "big") + e * key.d)


def get_s_using_all_si(array_of_si: Sequence[bytes]) -> bytes:
    """Return S = s_1 + ... + s_n as big-endian bytes."""
    return _int_bytes(sum(int.from_bytes(bytes(si), "big") for si in array_of_si))


def generate_multi_sign_signature(s: bytes, r: bytes) -> bytes:
    """Wrap (S, R) into a multi-signature envelope."""
    return marshal_xuper_signature(SigType.MULTI_SIG, _encode_content(s, r))


def get_shared_public_key_for_public_keys(keys: Sequence[PublicKey]) -> bytes:
    """Return the shared public key C = P_1 + ... + P_n, encoded as an uncompressed point."""
    if not keys:
        raise MultiSignError(_INVALID_INPUT)
    if any(key is None for key in keys):
        raise MultiSignError(_INVALID_INPUT)
    if not _same_curve(keys):
        raise MultiSignError(_NOT_SAME_CURVE)
    return _shared_key(keys)


def multi_sign(keys: Sequence[PrivateKey], message: bytes) -> bytes:
    """Sign ``message`` with all ``keys`` at once and return the enveloped signature."""
    if len(keys) < MINIMUM_PARTICIPANT:
        raise MultiSignError(_TOO_FEW_KEYS)
    message = bytes(message)
    if not message:
        raise MultiSignError(_EMPTY_MESSAGE)
    if any(key is None for key in keys):
        raise MultiSignError(_INVALID_INPUT)
    if not _same_curve(keys):
        raise MultiSignError(_NOT_SAME_CURVE)

    curve = keys[0].curve
    nonces = [get_random_32_bytes() for _ in keys]
    r = curve.marshal(*_sum_points(curve, [curve.scalar_base_mult(k) for k in nonces]))
    c = _shared_key(keys)
    e = _challenge(c, r, message)
    s = sum(int.from_bytes(k, "big") + e * key.d for key, k in zip(keys, nonces))
    return generate_multi_sign_signature(_int_bytes(s), r)


def verify_multi_sig(keys: Sequence[PublicKey], signature: bytes, message: bytes) -> bool:
    """Check signature content (the JSON object, not the envelope) against ``message``."""
    if len(keys) < MINIMUM_PARTICIPANT:
        raise MultiSignError(_TOO_FEW_KEYS)

    s, r = _decode_content(signature)
    if not r or not s:
        raise MultiSignError(_INVALID_SIGNATURE)

    message = bytes(message)
    if not message:
        raise MultiSignError(_EMPTY_MESSAGE)

    if not _same_curve(keys):
        raise MultiSignError(_NOT_SAME_CURVE)

    curve = keys[0].curve
    c = get_shared_public_key_for_public_keys(keys)

    lhs_x, lhs_y = curve.scalar_base_mult(s)
    e = _challenge(c, r, message)
    try:
        cx, cy = curve.unmarshal(c)
        r_point = curve.unmarshal(r)
    except ValueError as exc:
        raise MultiSignError(f"{_INVALID_SIGNATURE}: {exc}") from exc

    rhs_x, rhs_y = curve.scalar_mult(cx, cy, e)
    rhs_y = (-rhs_y) % curve.p
    result = curve.add(lhs_x, lhs_y, rhs_x, rhs_y)
    return result == r_point