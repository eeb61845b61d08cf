import pytest

from gmcrypt.curve import (
    NIST_P256,
    SM2_P256,
    PrivateKey,
    PublicKey,
    generate_key_by_seed,
)


def test_generator_on_curve_sm2():
    assert SM2_P256.is_on_curve(SM2_P256.gx, SM2_P256.gy) is True
    assert SM2_P256.is_on_curve(SM2_P256.gx, (SM2_P256.gy + 1) % SM2_P256.p) is False


def test_generator_on_curve_nist():
    assert NIST_P256.is_on_curve(NIST_P256.gx, NIST_P256.gy) is True
    assert NIST_P256.is_on_curve(NIST_P256.gx, (NIST_P256.gy + 1) % NIST_P256.p) is False


def test_order_times_generator_is_infinity_sm2():
    assert SM2_P256.scalar_base_mult(SM2_P256.n) == (0, 0)
    assert SM2_P256.scalar_base_mult(SM2_P256.n + 1) == (SM2_P256.gx, SM2_P256.gy)


def test_order_times_generator_is_infinity_nist():
    assert NIST_P256.scalar_base_mult(NIST_P256.n) == (0, 0)
    assert NIST_P256.scalar_base_mult(NIST_P256.n + 1) == (NIST_P256.gx, NIST_P256.gy)


def test_double_matches_add_sm2():
    doubled = SM2_P256.double(SM2_P256.gx, SM2_P256.gy)
    assert doubled == SM2_P256.add(SM2_P256.gx, SM2_P256.gy, SM2_P256.gx, SM2_P256.gy)
    assert doubled == SM2_P256.scalar_base_mult(2)
    assert SM2_P256.is_on_curve(*doubled) is True


def test_double_matches_add_nist():
    doubled = NIST_P256.double(NIST_P256.gx, NIST_P256.gy)
    assert doubled == NIST_P256.add(
        NIST_P256.gx, NIST_P256.gy, NIST_P256.gx, NIST_P256.gy
    )
    assert doubled == NIST_P256.scalar_base_mult(2)
    assert NIST_P256.is_on_curve(*doubled) is True


def test_scalar_additivity_sm2():
    a, b = 123456789, 987654321
    lhs = SM2_P256.scalar_base_mult(a + b)
    rhs = SM2_P256.add(*SM2_P256.scalar_base_mult(a), *SM2_P256.scalar_base_mult(b))
    assert lhs == rhs


def test_scalar_additivity_nist():
    a, b = 123456789, 987654321
    lhs = NIST_P256.scalar_base_mult(a + b)
    rhs = NIST_P256.add(
        *NIST_P256.scalar_base_mult(a), *NIST_P256.scalar_base_mult(b)
    )
    assert lhs == rhs


def test_add_with_infinity_and_inverse():
    c = SM2_P256
    assert c.add(0, 0, c.gx, c.gy) == (c.gx, c.gy)
    assert c.add(c.gx, c.gy, 0, 0) == (c.gx, c.gy)
    assert c.add(c.gx, c.gy, c.gx, c.p - c.gy) == (0, 0)


def test_scalar_bytes_and_int_agree():
    c = SM2_P256
    k = 0x0102030405060708090A
    assert c.scalar_base_mult(k.to_bytes(10, "big")) == c.scalar_base_mult(k)
    assert c.scalar_base_mult(b"") == (0, 0)


def test_scalar_mult_rejects_negative():
    with pytest.raises(ValueError):
        SM2_P256.scalar_base_mult(-1)


def test_marshal_round_trip_sm2():
    point = SM2_P256.scalar_base_mult(424242)
    data = SM2_P256.marshal(*point)
    assert len(data) == 65
    assert data[0] == 0x04
    assert SM2_P256.unmarshal(data) == point


def test_marshal_round_trip_nist():
    point = NIST_P256.scalar_base_mult(424242)
    data = NIST_P256.marshal(*point)
    assert len(data) == 65
    assert data[0] == 0x04
    assert NIST_P256.unmarshal(data) == point


def test_unmarshal_rejects_bad_input():
    c = SM2_P256
    good = c.marshal(c.gx, c.gy)
    with pytest.raises(ValueError):
        c.unmarshal(good[:-1])
    with pytest.raises(ValueError):
        c.unmarshal(b"\x02" + good[1:])
    with pytest.raises(ValueError):
        c.unmarshal(c.marshal(c.gx, (c.gy + 1) % c.p))


def test_generate_key_by_seed_zero_seed_gives_generator():
    key = generate_key_by_seed(SM2_P256, b"")
    assert key.d == 1
    assert (key.x, key.y) == (SM2_P256.gx, SM2_P256.gy)


def test_generate_key_by_seed_wraps_modulo():
    c = SM2_P256
    key = generate_key_by_seed(c, (c.n - 1).to_bytes(32, "big"))
    assert key.d == 1
    key2 = generate_key_by_seed(c, b"\x01")
    assert (key2.x, key2.y) == c.double(c.gx, c.gy)


def test_generated_key_properties():
    seed = bytes(range(64))
    key = generate_key_by_seed(SM2_P256, seed)
    assert 1 <= key.d < SM2_P256.n
    assert SM2_P256.is_on_curve(key.x, key.y)
    assert key == generate_key_by_seed(SM2_P256, seed)
    assert key.public_key == PublicKey(SM2_P256, key.x, key.y)
    assert isinstance(key, PrivateKey) and key.curve.name == "SM2-P-256"