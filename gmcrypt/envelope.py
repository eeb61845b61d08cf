"""The JSON envelope that wraps every signature together with its type."""

from __future__ import annotations

import base64
import binascii
import json
from enum import IntEnum


class SigType(IntEnum):
    ECDSA = 0
    SCHNORR = 1
    SCHNORR_RING = 2
    MULTI_SIG = 3


class InvalidSignatureError(ValueError):
    """The data is not a well-formed signature envelope."""

    def __init__(self, message: str = "XuperSignature is invalid") -> None:
        super().__init__(message)


class UnsupportedSignatureTypeError(InvalidSignatureError):
    """The envelope names a signature type this version does not know."""

    def __init__(self, sig_type: object) -> None:
        super().__init__(
            f"This XuperSignature type[{sig_type}] is not supported in this version."
        )
        self.sig_type = sig_type


def marshal_xuper_signature(sig_type: SigType, content: bytes) -> bytes:
    """Wrap signature content in the envelope; the content is base64 encoded."""
    envelope = {
        "SigType": int(SigType(sig_type)),
        "SigContent": base64.b64encode(bytes(content)).decode("ascii"),
    }
    return json.dumps(envelope, separators=(",", ":")).encode("utf-8")


def unmarshal_xuper_signature(data: bytes) -> tuple[SigType, bytes]:
    """Return ``(sig_type, content)`` from an envelope."""
    try:
        envelope = json.loads(bytes(data).decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise InvalidSignatureError() from exc
    if not isinstance(envelope, dict):
        raise InvalidSignatureError()

    raw_type = envelope.get("SigType")
    raw_content = envelope.get("SigContent")
    if not isinstance(raw_type, int) or isinstance(raw_type, bool):
        raise InvalidSignatureError()
    if raw_content is None:
        content = b""
    elif isinstance(raw_content, str):
        try:
            content = base64.b64decode(raw_content, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidSignatureError() from exc
    else:
        raise InvalidSignatureError()

    try:
        sig_type = SigType(raw_type)
    except ValueError:
        raise UnsupportedSignatureTypeError(raw_type) from None
    return sig_type, content