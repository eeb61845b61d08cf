import json

import pytest

from gmcrypt import multisign, ring, schnorr
from gmcrypt.curve import NIST_P256, SM2_P256, generate_key_by_seed
from gmcrypt.envelope import (
    SigType,
    UnsupportedSignatureTypeError,
    marshal_xuper_signature,
)
from gmcrypt.verify import xuper_sig_verify


@pytest.fixture(scope="module")
def private_keys():
    return [generate_key_by_seed(SM2_P256, bytes([i]) * 32) for i in range(11, 13)]


def _public(keys):
    return [k.public_key for k in keys]


def test_schnorr_signature(private_keys):
    sig = schnorr.sign(private_keys[0], b"hello")
    assert xuper_sig_verify(_public(private_keys), sig, b"hello") is True
    assert xuper_sig_verify(_public(private_keys), sig, b"bye") is False


def test_multi_signature(private_keys):
    sig = multisign.multi_sign(private_keys, b"hello")
    assert xuper_sig_verify(_public(private_keys), sig, b"hello") is True
    assert xuper_sig_verify(_public(private_keys), sig, b"bye") is False


def test_ring_signature(private_keys):
    sig = ring.sign([k.public_key for k in private_keys[1:]] + [
        generate_key_by_seed(SM2_P256, b"\x20" * 32).public_key
    ], private_keys[0], b"hello")
    keys = _public(private_keys) + [generate_key_by_seed(SM2_P256, b"\x20" * 32).public_key]
    assert xuper_sig_verify(keys, sig, b"hello") is True


def test_unknown_type_raises(private_keys):
    data = json.dumps({"SigType": 9, "SigContent": ""}).encode()
    with pytest.raises(UnsupportedSignatureTypeError):
        xuper_sig_verify(_public(private_keys), data, b"hello")


def test_ecdsa_type_not_available(private_keys):
    data = marshal_xuper_signature(SigType.ECDSA, b"{}")
    with pytest.raises(ValueError, match="ECDSA"):
        xuper_sig_verify(_public(private_keys), data, b"hello")


def test_bare_signature_not_available(private_keys):
    with pytest.raises(ValueError, match="ECDSA"):
        xuper_sig_verify(_public(private_keys), b"\x30\x06\x02\x01\x01\x02\x01\x01", b"hello")


def test_nist_curve_rejected(private_keys):
    nist = generate_key_by_seed(NIST_P256, b"\x05" * 32).public_key
    sig = schnorr.sign(private_keys[0], b"hello")
    with pytest.raises(ValueError, match="P-256"):
        xuper_sig_verify([nist], sig, b"hello")


def test_nist_curve_rejected_for_bare_data():
    nist = generate_key_by_seed(NIST_P256, b"\x05" * 32).public_key
    with pytest.raises(ValueError, match="has not been supported"):
        xuper_sig_verify([nist], b"garbage", b"hello")


def test_no_keys_raises():
    with pytest.raises(ValueError):
        xuper_sig_verify([], b"{}", b"hello")