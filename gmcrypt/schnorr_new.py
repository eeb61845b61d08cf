"""Schnorr signatures with s = k + e*x, checked as H(m || s*G - e*P) = e."""

from __future__ import annotations

import json

from gmcrypt.curve import Curve, Point, PrivateKey, PublicKey
from gmcrypt.envelope import InvalidSignatureError, SigType, marshal_xuper_signature
from gmcrypt.hashing import hash_using_sm3


def _int_bytes(value: int) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def _challenge(curve: Curve, message: bytes, point: Point) -> int:
    digest = hash_using_sm3(bytes(message) + curve.marshal(*point))
    return int.from_bytes(digest, "big")


def _decode_signature(data: bytes) -> tuple[int, int]:
    try:
        decoded = json.loads(bytes(data).decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise InvalidSignatureError(
            f"Failed unmashalling schnorr signature [{exc}]"
        ) from exc
    if not isinstance(decoded, dict):
        raise InvalidSignatureError("Failed unmashalling schnorr signature [not an object]")
    values = []
    for name in ("E", "S"):
        value = decoded.get(name)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise InvalidSignatureError(
                f"Failed unmashalling schnorr signature [invalid field {name}]"
            )
        values.append(value)
    return values[0], values[1]


def compute_s_by_kex(curve: Curve, k: int, e: int, x: int) -> int:
    """Return s = k + e*x."""
    return k + e * x


def sign(private_key: PrivateKey, message: bytes) -> bytes:
    """Sign ``message`` and return the signature wrapped in its envelope.

    The nonce is derived deterministically as k = SM3(m || x).
    """
    if private_key is None:
        raise ValueError("Invalid privateKey. PrivateKey must not be nil.")
    message = bytes(message)
    curve = private_key.curve

    k_bytes = hash_using_sm3(message + _int_bytes(private_key.d))
    k = int.from_bytes(k_bytes, "big")
    e = _challenge(curve, message, curve.scalar_base_mult(k_bytes))
    s = compute_s_by_kex(curve, k, e, private_key.d)

    content = json.dumps({"E": e, "S": s}, separators=(",", ":")).encode("utf-8")
    return marshal_xuper_signature(SigType.SCHNORR, content)


def verify(public_key: PublicKey, signature: bytes, message: bytes) -> bool:
    """Check signature content (the JSON object, not the envelope) against ``message``."""
    e, s = _decode_signature(signature)
    curve = public_key.curve
    x1, y1 = curve.scalar_base_mult(s)
    x2, y2 = curve.scalar_mult(public_key.x, public_key.y, e)
    y2 = (-y2) % curve.p
    point = curve.add(x1, y1, x2, y2)
    return _challenge(curve, message, point) == e