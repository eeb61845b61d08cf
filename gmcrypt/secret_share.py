"""Shamir secret sharing over the prime field of :mod:`gmcrypt.polynomial`."""

from __future__ import annotations

from typing import Mapping

from gmcrypt.polynomial import evaluate, get_polynomial_by_points, random_generate


class SecretShareError(ValueError):
    """Invalid parameters for splitting or retrieving a secret."""


def complex_secret_split(
    total_share_number: int, minimum_share_number: int, secret: bytes
) -> dict[int, int]:
    """Split ``secret`` into shares ``{x: f(x)}`` for x in 1..total.

    Any ``minimum_share_number`` of the shares are enough to retrieve the secret.
    """
    if total_share_number < 2:
        raise SecretShareError("The totalShareNumber must be greater than one.")
    if minimum_share_number > total_share_number:
        raise SecretShareError(
            "The minimumShareNumber must be smaller than the totalShareNumber."
        )

    poly = random_generate(minimum_share_number - 1, secret)
    return {x: evaluate(poly, x) for x in range(1, total_share_number + 1)}


def complex_secret_retrieve(shares: Mapping[int, int]) -> bytes:
    """Retrieve the secret from shares by Lagrange interpolation at x = 0."""
    if not shares:
        raise SecretShareError("At least one share is required.")
    coefficients = get_polynomial_by_points(shares)
    secret = coefficients[-1]
    return secret.to_bytes((secret.bit_length() + 7) // 8, "big")