"""Polynomials with big integer coefficients over a large prime field.

Polynomials produced by :func:`random_generate` and consumed by :func:`evaluate`
list their coefficients from the constant term upwards; polynomials produced by
interpolation list them from the highest power down to the constant term.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from gmcrypt.entropy import KeyStrength, generate_seed_with_strength_and_key_len

PRIME = int(
    "24815323469403931728221172233738523533528335161133543380459461440894543366372904768334987263999999999999999999663"
)

_COEFFICIENT_BYTES = 32


def _random_coefficients(count: int) -> list[int]:
    if count <= 0:
        return []
    raw = generate_seed_with_strength_and_key_len(
        KeyStrength.HARD, _COEFFICIENT_BYTES * count
    )
    return [
        int.from_bytes(raw[offset : offset + _COEFFICIENT_BYTES], "big")
        for offset in range(0, len(raw), _COEFFICIENT_BYTES)
    ]


def random_generate(degree: int, secret: bytes) -> list[int]:
    """Return a random polynomial of ``degree`` whose constant term is ``secret``.

    Coefficients are in ascending order; the leading one is never zero.
    """
    if degree < 0:
        raise ValueError("degree must not be negative")
    intercept = int.from_bytes(bytes(secret), "big")
    if degree == 0:
        return [intercept]

    coefficients = [intercept, *_random_coefficients(degree - 1)]
    while True:
        (highest,) = _random_coefficients(1)
        if highest != 0:
            coefficients.append(highest)
            return coefficients


def evaluate(coefficients: Sequence[int], x: int) -> int:
    """Evaluate an ascending-order polynomial at ``x`` (no modular reduction)."""
    if not coefficients:
        raise ValueError("polynomial has no coefficients")
    result = 0
    for coefficient in reversed(coefficients):
        result = result * x + coefficient
    return result


def add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two polynomials term by term modulo :data:`PRIME`; the result has len(a) terms."""
    if len(b) < len(a):
        raise ValueError("second polynomial has fewer terms than the first")
    return [(x + y) % PRIME for x, y in zip(a, b)]


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Multiply two polynomials (no modular reduction)."""
    if not a or not b:
        raise ValueError("polynomial has no coefficients")
    result = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            result[i + j] += x * y
    return result


def scale(a: Sequence[int], k: int) -> list[int]:
    """Multiply every coefficient by ``k`` modulo :data:`PRIME`."""
    return [(x * k) % PRIME for x in a]


def _lagrange_base_polynomial(xs: Sequence[int], xpos: int) -> list[int]:
    poly = [1]
    denominator = 1
    for i, xi in enumerate(xs):
        if i == xpos:
            continue
        poly = multiply(poly, [1, -xi])
        denominator *= xs[xpos] - xi
    try:
        inverse = pow(denominator, -1, PRIME)
    except ValueError:
        raise ValueError("interpolation points must have distinct x values") from None
    return scale(poly, inverse)


def get_polynomial_by_points(points: Mapping[int, int]) -> list[int]:
    """Interpolate the polynomial through ``points`` (x -> y) over GF(PRIME).

    Coefficients are returned from the highest power down to the constant term.
    """
    xs = list(points)
    ys = [points[x] for x in xs]
    result = [0] * len(xs)
    for position, y in enumerate(ys):
        result = add(result, scale(_lagrange_base_polynomial(xs, position), y))
    return result