"""Mnemonic sentences: entropy generation, encoding, decoding and seed derivation."""

from __future__ import annotations

import hashlib
import secrets

from gmcrypt.entropy import (
    InvalidEntropyLengthError,
    InvalidRawEntropyLengthError,
    MnemonicChecksumError,
    MnemonicError,
    MnemonicWordCountError,
)
from gmcrypt.hashing import hash_using_sm3
from gmcrypt.wordlist import reversed_word_map, word_list

_VALID_WORD_COUNTS = frozenset({12, 15, 18, 21, 24})
_BITS_PER_WORD = 11
_WORD_MASK = (1 << _BITS_PER_WORD) - 1
_SEED_ROUNDS = 2048


def _validate_entropy_bit_size(bit_size: int) -> None:
    if bit_size % 32 != 0 or not 128 <= bit_size <= 256:
        raise InvalidEntropyLengthError()


def _validate_raw_entropy_bit_size(bit_size: int) -> None:
    # Eight extra bits are reserved to tag the cryptography in use.
    total = bit_size + 8
    if total % 32 != 0 or not 128 <= total <= 256:
        raise InvalidRawEntropyLengthError()


def generate_entropy(bit_size: int) -> bytes:
    """Return ``bit_size`` bits of system entropy; ``bit_size + 8`` must be a valid entropy size."""
    _validate_raw_entropy_bit_size(bit_size)
    return secrets.token_bytes(bit_size // 8)


def _with_checksum(data: bytes) -> int:
    """Append len(data)/4 checksum bits, taken from the second byte of SM3(data)."""
    checksum_byte = hash_using_sm3(data)[1]
    value = int.from_bytes(data, "big")
    for i in range(len(data) // 4):
        value <<= 1
        if i < 8 and checksum_byte & (0x80 >> i):
            value |= 1
    return value


def generate_mnemonic(entropy: bytes, language: int) -> str:
    """Encode ``entropy`` as a space-separated mnemonic sentence in ``language``."""
    entropy = bytes(entropy)
    entropy_bits = len(entropy) * 8
    _validate_entropy_bit_size(entropy_bits)
    words = word_list(language)

    checksum_bits = entropy_bits // 32
    sentence_length = (entropy_bits + checksum_bits) // _BITS_PER_WORD
    value = _with_checksum(entropy)

    indices = (
        (value >> (_BITS_PER_WORD * (sentence_length - 1 - position))) & _WORD_MASK
        for position in range(sentence_length)
    )
    return " ".join(words[index] for index in indices)


def get_words_from_valid_mnemonic_sentence(mnemonic: str, language: int) -> list[str]:
    """Split ``mnemonic`` into words, checking their count and that each is in the word list."""
    words = mnemonic.split()
    if len(words) not in _VALID_WORD_COUNTS:
        raise MnemonicWordCountError()

    vocabulary = reversed_word_map(language)
    for word in words:
        if word not in vocabulary:
            raise MnemonicError(f"Mnemonic word [{word}] is not valid.")
    return words


def get_entropy_from_mnemonic(mnemonic: str, language: int) -> bytes:
    """Recover the entropy encoded by ``mnemonic``, verifying its checksum.

    The result carries no leading zero bytes.
    """
    words = get_words_from_valid_mnemonic_sentence(mnemonic, language)
    total_bits = len(words) * _BITS_PER_WORD
    checksum_bits = total_bits % 32

    index_of = reversed_word_map(language)
    combined = 0
    for word in words:
        combined = (combined << _BITS_PER_WORD) | index_of[word]

    entropy = combined >> checksum_bits
    entropy_bytes = entropy.to_bytes((total_bits - checksum_bits) // 8, "big")
    if _with_checksum(entropy_bytes) != combined:
        raise MnemonicChecksumError()

    return entropy.to_bytes((entropy.bit_length() + 7) // 8, "big")


def _generate_seed(mnemonic: str, password: str, key_len: int) -> bytes:
    if key_len < 0:
        raise ValueError("key length must not be negative")
    if key_len == 0:
        return b""
    salt = ("mnemonic" + password).encode("utf-8")
    return hashlib.pbkdf2_hmac(
        "sha512", mnemonic.encode("utf-8"), salt, _SEED_ROUNDS, dklen=key_len
    )


def generate_seed_with_error_checking(
    mnemonic: str, password: str, key_len: int, language: int
) -> bytes:
    """Validate ``mnemonic`` and stretch it with ``password`` into a ``key_len``-byte seed."""
    get_entropy_from_mnemonic(mnemonic, language)
    return _generate_seed(mnemonic, password, key_len)