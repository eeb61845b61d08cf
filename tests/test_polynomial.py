import pytest

from gmcrypt.polynomial import (
    PRIME,
    add,
    evaluate,
    get_polynomial_by_points,
    multiply,
    random_generate,
    scale,
)


def test_random_generate_shape():
    secret = b"secret"
    poly = random_generate(3, secret)
    assert len(poly) == 4
    assert poly[0] == int.from_bytes(secret, "big")
    assert poly[-1] != 0
    assert all(0 <= c < 2**256 for c in poly[1:])


def test_random_generate_degree_one():
    secret = b"secret"
    poly = random_generate(1, secret)
    assert len(poly) == 2
    assert poly[0] == int.from_bytes(secret, "big")
    assert poly[1] != 0


def test_random_generate_is_random():
    secret = b"secret"
    first = random_generate(2, secret)
    second = random_generate(2, secret)
    assert len(first) == len(second) == 3
    assert first[0] == second[0] == int.from_bytes(secret, "big")
    assert first[1:] != second[1:]


def test_random_generate_negative_degree():
    with pytest.raises(ValueError):
        random_generate(-1, b"secret")


def test_evaluate_invariants():
    coefficients = [5, 7, 11, 13]
    assert evaluate(coefficients, 0) == 5
    assert evaluate(coefficients, 1) == sum(coefficients)


def test_evaluate_empty_raises():
    with pytest.raises(ValueError):
        evaluate([], 3)


def test_multiply_known_product():
    assert multiply([1, -2], [1, -3]) == [1, -5, 6]


@pytest.mark.parametrize("x", [0, 1, 2, 17, 12345])
def test_multiply_matches_evaluation(x):
    a = [3, 0, 4, 9]
    b = [2, 8]
    assert evaluate(multiply(a, b), x) == evaluate(a, x) * evaluate(b, x)


@pytest.mark.parametrize("x", [1, 5, 99])
def test_add_matches_evaluation(x):
    a = [PRIME - 1, 4, 10]
    b = [3, PRIME + 2, 7]
    assert evaluate(add(a, b), x) % PRIME == (evaluate(a, x) + evaluate(b, x)) % PRIME
    assert all(0 <= c < PRIME for c in add(a, b))


def test_add_rejects_short_second():
    with pytest.raises(ValueError):
        add([1, 2, 3], [1])


@pytest.mark.parametrize("x", [1, 8, 1000])
def test_scale_matches_evaluation(x):
    a = [6, PRIME + 9, 2]
    k = 31
    assert evaluate(scale(a, k), x) % PRIME == (evaluate(a, x) * k) % PRIME


def test_interpolation_recovers_polynomial():
    ascending = [42, 17, 9, 3]
    points = {x: evaluate(ascending, x) for x in range(1, 5)}
    recovered = get_polynomial_by_points(points)
    assert recovered == [c % PRIME for c in reversed(ascending)]


def test_interpolation_from_non_consecutive_points():
    ascending = [123456789, 987654321, 55555]
    points = {x: evaluate(ascending, x) for x in (2, 7, 11)}
    recovered = get_polynomial_by_points(points)
    assert recovered[-1] == ascending[0]
    assert list(reversed(recovered)) == ascending