"""DER encoding of ECDSA signatures (SEQUENCE of INTEGER r, s) and public keys."""

from __future__ import annotations

from gmcrypt.curve import PublicKey

_TAG_INTEGER = 0x02
_TAG_SEQUENCE = 0x30


def _encode_length(length: int) -> bytes:
    if length < 0x80:
        return bytes([length])
    body = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([0x80 | len(body)]) + body


def _encode_integer(value: int) -> bytes:
    if value >= 0:
        size = (value.bit_length() + 8) // 8
    else:
        size = ((~value).bit_length() + 8) // 8
    body = value.to_bytes(size, "big", signed=True)
    return bytes([_TAG_INTEGER]) + _encode_length(len(body)) + body


def _read_tlv(data: bytes, offset: int) -> tuple[int, bytes, int]:
    """Return (tag, content, offset after the element)."""
    if offset + 2 > len(data):
        raise ValueError("truncated DER element")
    tag = data[offset]
    first = data[offset + 1]
    offset += 2
    if first < 0x80:
        length = first
    else:
        count = first & 0x7F
        if count == 0:
            raise ValueError("indefinite length is not allowed in DER")
        if count > 4 or offset + count > len(data):
            raise ValueError("invalid DER length")
        encoded = data[offset : offset + count]
        offset += count
        if encoded[0] == 0:
            raise ValueError("non-minimal DER length")
        length = int.from_bytes(encoded, "big")
        if length < 0x80:
            raise ValueError("non-minimal DER length")
    end = offset + length
    if end > len(data):
        raise ValueError("truncated DER element")
    return tag, data[offset:end], end


def _decode_integer(body: bytes) -> int:
    if not body:
        raise ValueError("empty integer")
    if len(body) > 1 and (
        (body[0] == 0x00 and body[1] < 0x80) or (body[0] == 0xFF and body[1] >= 0x80)
    ):
        raise ValueError("integer not minimally-encoded")
    return int.from_bytes(body, "big", signed=True)


def marshal_ecdsa_signature(r: int, s: int) -> bytes:
    """Encode (r, s) as a DER SEQUENCE of two INTEGERs."""
    body = _encode_integer(r) + _encode_integer(s)
    return bytes([_TAG_SEQUENCE]) + _encode_length(len(body)) + body


def marshal_public_key(public_key: PublicKey) -> bytes:
    """Encode a public key as an uncompressed curve point."""
    return public_key.curve.marshal(public_key.x, public_key.y)


def unmarshal_ecdsa_signature(raw: bytes) -> tuple[int, int]:
    """Decode a DER signature into (r, s); both must be positive.

    Bytes following the SEQUENCE are ignored.
    """
    raw = bytes(raw)
    try:
        tag, body, _ = _read_tlv(raw, 0)
        if tag != _TAG_SEQUENCE:
            raise ValueError("expected a SEQUENCE")
        values = []
        offset = 0
        for _ in range(2):
            tag, content, offset = _read_tlv(body, offset)
            if tag != _TAG_INTEGER:
                raise ValueError("expected an INTEGER")
            values.append(_decode_integer(content))
        if offset != len(body):
            raise ValueError("trailing data in SEQUENCE")
    except ValueError as exc:
        raise ValueError(
            f"failed to unmashal the signature [{list(raw)}] to R & S, "
            f"and the error is [{exc}]"
        ) from exc

    r, s = values
    if r <= 0:
        raise ValueError("invalid signature, R must be larger than zero")
    if s <= 0:
        raise ValueError("invalid signature, S must be larger than zero")
    return r, s