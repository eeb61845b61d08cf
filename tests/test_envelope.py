import json

import pytest

from gmcrypt.envelope import (
    InvalidSignatureError,
    SigType,
    UnsupportedSignatureTypeError,
    marshal_xuper_signature,
    unmarshal_xuper_signature,
)


@pytest.mark.parametrize("sig_type", list(SigType))
def test_round_trip(sig_type):
    content = b'{"E":1,"S":2}\x00\xff'
    data = marshal_xuper_signature(sig_type, content)
    assert unmarshal_xuper_signature(data) == (sig_type, content)


def test_wire_format():
    data = marshal_xuper_signature(SigType.SCHNORR, b"abc")
    decoded = json.loads(data)
    assert decoded["SigType"] == int(SigType.SCHNORR)
    assert decoded["SigContent"] == "YWJj"


def test_null_content_is_empty():
    data = json.dumps({"SigType": int(SigType.ECDSA), "SigContent": None}).encode()
    assert unmarshal_xuper_signature(data) == (SigType.ECDSA, b"")


@pytest.mark.parametrize(
    "data",
    [
        b"\x30\x45\x02",
        b"not json",
        b"[1, 2]",
        b'{"SigContent": "YWJj"}',
        b'{"SigType": 1, "SigContent": "***"}',
        b'{"SigType": 1, "SigContent": 5}',
    ],
)
def test_invalid_envelopes(data):
    with pytest.raises(InvalidSignatureError):
        unmarshal_xuper_signature(data)


def test_unknown_type():
    data = json.dumps({"SigType": 77, "SigContent": ""}).encode()
    with pytest.raises(UnsupportedSignatureTypeError) as info:
        unmarshal_xuper_signature(data)
    assert info.value.sig_type == 77
    assert "type[77] is not supported" in str(info.value)


def test_default_error_message():
    assert str(InvalidSignatureError()) == "XuperSignature is invalid"