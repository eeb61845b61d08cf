import itertools

import pytest

from gmcrypt.secret_share import (
    SecretShareError,
    complex_secret_retrieve,
    complex_secret_split,
)


def test_split_produces_numbered_shares():
    secret = b"secret"
    shares = complex_secret_split(5, 3, secret)
    assert sorted(shares) == [1, 2, 3, 4, 5]


def test_retrieve_from_all_shares():
    secret = b"secret"
    shares = complex_secret_split(5, 3, secret)
    assert complex_secret_retrieve(shares) == secret


def test_retrieve_from_every_minimal_subset():
    secret = b"secret"
    shares = complex_secret_split(5, 3, secret)
    for subset in itertools.combinations(shares, 3):
        assert complex_secret_retrieve({x: shares[x] for x in subset}) == secret


def test_longer_payload_round_trip():
    payload = bytes(range(1, 40))
    shares = complex_secret_split(7, 4, payload)
    chosen = {x: shares[x] for x in (2, 3, 5, 7)}
    assert complex_secret_retrieve(chosen) == payload


def test_retrieve_worked_example():
    secret = b"secret"
    s = int.from_bytes(secret, "big")
    shares = {1: s + 5, 2: s + 10}
    assert complex_secret_retrieve(shares) == secret


def test_total_must_exceed_one():
    with pytest.raises(SecretShareError, match="greater than one"):
        complex_secret_split(1, 1, b"secret")


def test_minimum_must_not_exceed_total():
    with pytest.raises(SecretShareError, match="smaller than"):
        complex_secret_split(3, 4, b"secret")


def test_retrieve_requires_shares():
    with pytest.raises(SecretShareError):
        complex_secret_retrieve({})