"""Schnorr ring signatures: any one member of a ring of public keys can sign anonymously.

The ring is closed by the link function H(m || s_i*G + e_i*P_i) = e_{i+1}.
The signer hides their public key at a random position r and picks a random k.
They set e_{r+1} = H(m || k*G), walk round the ring with random s_i, and close
the gap with s_r = k - e_r * x_r. The signature is (members, e_0, s_0..s_{R-1}).
"""

from __future__ import annotations

import json
import secrets
from dataclasses import dataclass
from typing import Sequence

from gmcrypt.curve import Curve, Point, PrivateKey, PublicKey
from gmcrypt.entropy import (
    KEY_LENGTH_INT32,
    KeyStrength,
    generate_seed_with_strength_and_key_len,
)
from gmcrypt.envelope import SigType, marshal_xuper_signature
from gmcrypt.hashing import hash_using_sm3
from gmcrypt.schnorr import SignatureGenerationError, compute_s_by_kex

MINIMUM_PARTICIPANT = 2

_GENERATION_FAILED = "failed to generate ring signature"
_TOO_FEW_KEYS = "The total num of keys should be greater than one"
_NOT_SAME_CURVE = "the curve is not same as curve of members"
_KEY_NOT_MATCH = "key param not match"


class RingSignatureError(ValueError):
    """Invalid input for creating or verifying a ring signature."""


@dataclass(frozen=True)
class _RingContent:
    curve_name: str
    members: tuple[tuple[int, int], ...]
    e: int | None
    s: tuple[int, ...]


def _challenge(curve: Curve, message: bytes, point: Point) -> int:
    return int.from_bytes(hash_using_sm3(bytes(message) + curve.marshal(*point)), "big")


def _link(curve: Curve, message: bytes, s: int, e: int, x: int, y: int) -> int:
    """Return H(m || s*G + e*P)."""
    point = curve.add(*curve.scalar_base_mult(s), *curve.scalar_mult(x, y, e))
    return _challenge(curve, message, point)


def _random_scalar() -> bytes:
    return generate_seed_with_strength_and_key_len(KeyStrength.HARD, KEY_LENGTH_INT32)


def _same_curve(keys: Sequence[PublicKey]) -> bool:
    curve = keys[0].curve
    return all(key.curve == curve for key in keys)


def _check_sign_params(keys: Sequence[PublicKey], private_key: PrivateKey) -> None:
    if private_key is None:
        raise RingSignatureError("Invalid privateKey. PrivateKey must not be nil.")
    if len(keys) < MINIMUM_PARTICIPANT:
        raise RingSignatureError(_TOO_FEW_KEYS)
    if not _same_curve(keys):
        raise RingSignatureError(_NOT_SAME_CURVE)
    if keys[0].curve != private_key.curve:
        raise RingSignatureError(_NOT_SAME_CURVE)


def _encode_content(curve: Curve, members: Sequence[PublicKey], e: int, s: Sequence[int]) -> bytes:
    content = {
        "CurveName": curve.name,
        "Members": [{"X": key.x, "Y": key.y} for key in members],
        "E": e,
        "S": list(s),
    }
    return json.dumps(content, separators=(",", ":")).encode("utf-8")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_content(data: bytes) -> _RingContent:
    def fail(reason: object) -> RingSignatureError:
        return RingSignatureError(f"Failed unmashalling schnorr ring signature [{reason}]")

    try:
        decoded = json.loads(bytes(data).decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise fail(exc) from exc
    if not isinstance(decoded, dict):
        raise fail("not an object")

    curve_name = decoded.get("CurveName") or ""
    if not isinstance(curve_name, str):
        raise fail("invalid field CurveName")

    raw_members = decoded.get("Members") or []
    if not isinstance(raw_members, list):
        raise fail("invalid field Members")
    members = []
    for member in raw_members:
        if not isinstance(member, dict):
            raise fail("invalid member")
        x, y = member.get("X"), member.get("Y")
        if not (_is_int(x) and _is_int(y)):
            raise fail("invalid member coordinates")
        members.append((x, y))

    e = decoded.get("E")
    if e is not None and not _is_int(e):
        raise fail("invalid field E")

    raw_s = decoded.get("S") or []
    if not isinstance(raw_s, list) or not all(_is_int(v) for v in raw_s):
        raise fail("invalid field S")

    return _RingContent(curve_name, tuple(members), e, tuple(raw_s))


def _keys_match_members(keys: Sequence[PublicKey], members: Sequence[tuple[int, int]]) -> bool:
    if len(keys) != len(members):
        return False
    y_by_x = {key.x: key.y for key in keys}
    return all(x in y_by_x and y_by_x[x] == y for x, y in members)


def sign(keys: Sequence[PublicKey], private_key: PrivateKey, message: bytes) -> bytes:
    """Sign ``message`` on behalf of the ring ``keys`` plus the signer's own key.

    Returns the signature wrapped in its envelope.
    """
    _check_sign_params(keys, private_key)
    message = bytes(message)
    curve = private_key.curve

    ring_size = len(keys) + 1
    signer = secrets.randbelow(ring_size)
    members = [*keys[:signer], private_key.public_key, *keys[signer:]]

    k = _random_scalar()
    e_values = [0] * ring_size
    s_values = [0] * ring_size

    position = (signer + 1) % ring_size
    e_values[position] = _challenge(curve, message, curve.scalar_base_mult(k))
    while position != signer:
        s = int.from_bytes(_random_scalar(), "big")
        s_values[position] = s
        member = members[position]
        e_values[(position + 1) % ring_size] = _link(
            curve, message, s, e_values[position], member.x, member.y
        )
        position = (position + 1) % ring_size

    try:
        s_values[signer] = compute_s_by_kex(
            curve, int.from_bytes(k, "big"), e_values[signer], private_key.d
        )
    except SignatureGenerationError:
        raise RingSignatureError(_GENERATION_FAILED) from None

    content = _encode_content(curve, members, e_values[0], s_values)
    return marshal_xuper_signature(SigType.SCHNORR_RING, content)


def verify(keys: Sequence[PublicKey], signature: bytes | None, message: bytes) -> bool:
    """Check ring signature content (the JSON object, not the envelope) against ``message``."""
    if len(keys) < MINIMUM_PARTICIPANT:
        raise RingSignatureError(_TOO_FEW_KEYS)
    message = bytes(message)
    if not message:
        return False
    if signature is None:
        return False

    content = _decode_content(signature)
    if len(content.s) != len(content.members):
        return False
    if content.e is None:
        return False

    curve = keys[0].curve
    if curve.name != content.curve_name:
        raise RingSignatureError(_NOT_SAME_CURVE)
    if not _same_curve(keys):
        raise RingSignatureError(_NOT_SAME_CURVE)
    if not _keys_match_members(keys, content.members):
        raise RingSignatureError(_KEY_NOT_MATCH)

    e = content.e
    for (x, y), s in zip(content.members, content.s):
        e = _link(curve, message, s, e, x, y)
    return e == content.e