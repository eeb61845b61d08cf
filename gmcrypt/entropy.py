"""Random seed generation with selectable strength, and the mnemonic error types."""

from __future__ import annotations

import hashlib
import secrets
from enum import IntEnum

KEY_LENGTH_INT8 = 8
KEY_LENGTH_INT16 = 16
KEY_LENGTH_INT32 = 32
KEY_LENGTH_INT64 = 64

_SEED_SALT = b"jingbo is handsome."
_PBKDF2_ROUNDS = 2048


class KeyStrength(IntEnum):
    EASY = 0
    MIDDLE = 1
    HARD = 2


_ENTROPY_BITS = {
    KeyStrength.EASY: 128,
    KeyStrength.MIDDLE: 192,
    KeyStrength.HARD: 256,
}


class MnemonicError(ValueError):
    """Base error for entropy and mnemonic handling."""

    default_message = "Invalid mnemonic parameters"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidRawEntropyLengthError(MnemonicError):
    default_message = (
        "Entropy length must within [120, 248] and after +8 be multiples of 32"
    )


class InvalidEntropyLengthError(MnemonicError):
    default_message = "Entropy length must within [128, 256] and be multiples of 32"


class StrengthNotSupportedError(MnemonicError):
    default_message = "This strength has not been supported yet."


class LanguageNotSupportedError(MnemonicError):
    default_message = "This language has not been supported yet."


class MnemonicWordCountError(MnemonicError):
    default_message = (
        "The number of words in the Mnemonic sentence is not valid. "
        "It must be within [12, 15, 18, 21, 24]"
    )


class MnemonicChecksumError(MnemonicError):
    default_message = "The checksum within the Mnemonic sentence incorrect"


def _validate_entropy_bit_size(bit_size: int) -> None:
    if bit_size % 32 != 0 or not 128 <= bit_size <= 256:
        raise InvalidEntropyLengthError()


def _generate_entropy(bit_size: int) -> bytes:
    _validate_entropy_bit_size(bit_size)
    return secrets.token_bytes(bit_size // 8)


def _seed_from_password(random_password: bytes, key_length: int) -> bytes:
    if key_length < 0:
        raise ValueError("key length must not be negative")
    if key_length == 0:
        return b""
    return hashlib.pbkdf2_hmac(
        "sha512", random_password, _SEED_SALT, _PBKDF2_ROUNDS, dklen=key_length
    )


def generate_seed_with_strength_and_key_len(strength: int, key_length: int) -> bytes:
    """Draw system entropy of the given strength and stretch it to ``key_length`` bytes."""
    try:
        level = KeyStrength(strength)
    except ValueError:
        raise StrengthNotSupportedError() from None
    entropy = _generate_entropy(_ENTROPY_BITS[level])
    return _seed_from_password(entropy, key_length)