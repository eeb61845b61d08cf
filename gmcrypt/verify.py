"""Verification of any enveloped signature, dispatched on its type and curve."""

from __future__ import annotations

from typing import Sequence

from gmcrypt import multisign, ring, schnorr
from gmcrypt.curve import SM2_P256, PublicKey
from gmcrypt.envelope import (
    InvalidSignatureError,
    SigType,
    UnsupportedSignatureTypeError,
    unmarshal_xuper_signature,
)


def _check_gm_curve(key: PublicKey) -> None:
    if key.curve.name != SM2_P256.name:
        raise ValueError(f"This cryptography[{key.curve.name}] has not been supported yet.")


def _ecdsa_unavailable() -> ValueError:
    return ValueError("SM2 ECDSA signatures cannot be verified by this package.")


def xuper_sig_verify(keys: Sequence[PublicKey], signature: bytes, message: bytes) -> bool:
    """Verify an enveloped signature against ``keys`` and ``message``.

    Data that is not an envelope is taken to be a bare DER ECDSA signature.
    Only keys on the SM2 curve are accepted.
    """
    if not keys:
        raise ValueError("at least one public key is required")
    first = keys[0]

    try:
        sig_type, content = unmarshal_xuper_signature(signature)
    except UnsupportedSignatureTypeError:
        raise
    except InvalidSignatureError:
        _check_gm_curve(first)
        raise _ecdsa_unavailable() from None

    _check_gm_curve(first)
    if sig_type is SigType.ECDSA:
        raise _ecdsa_unavailable()
    if sig_type is SigType.SCHNORR:
        return schnorr.verify(first, content, message)
    if sig_type is SigType.SCHNORR_RING:
        return ring.verify(keys, content, message)
    if sig_type is SigType.MULTI_SIG:
        return multisign.verify_multi_sig(keys, content, message)
    raise UnsupportedSignatureTypeError(sig_type)