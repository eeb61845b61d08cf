"""SM3 hashing, Schnorr, multi and ring signatures on the SM2 curve, mnemonics and secret sharing."""

__version__ = "0.1.0"