# gmcrypt

Signature and key-material tools over the SM2 elliptic curve and the SM3 hash.

## What it does

- `gmcrypt.sm3`: the SM3 hash, with a `hashlib`-style `SM3` object (`update`,
  `digest`, `hexdigest`, `copy`, `reset`) and `sm3_sum`.
- `gmcrypt.hashing`: `hash_using_sm3`, `hash_using_ripemd160` and
  `hash_using_hmac512`.
- `gmcrypt.curve`: curve arithmetic (`Curve`, with the `SM2_P256` and `NIST_P256`
  curves), `PublicKey` and `PrivateKey`, and `generate_key_by_seed`, which derives
  a key pair deterministically from seed bytes.
- `gmcrypt.schnorr` and `gmcrypt.schnorr_new`: two forms of Schnorr signature.
  `sign` returns an enveloped signature; `verify` takes the signature content
  (the JSON object inside the envelope).
- `gmcrypt.multisign`: multi-party Schnorr signatures. `multi_sign` does it all in
  one step. The step-by-step functions (`get_random_32_bytes`,
  `get_ri_using_random_bytes`, `get_r_using_all_ri`, `get_si_using_kcrm`,
  `get_s_using_all_si`, `generate_multi_sign_signature`) let each party keep its
  own key.
- `gmcrypt.ring`: Schnorr ring signatures, where any member of a ring of public
  keys can sign without revealing which one.
- `gmcrypt.ecdsa_der`: DER encoding and decoding of `(r, s)` signature pairs, and
  `marshal_public_key`.
- `gmcrypt.envelope`: the JSON signature envelope (`SigType`,
  `marshal_xuper_signature`, `unmarshal_xuper_signature`).
- `gmcrypt.verify`: `xuper_sig_verify`, which unwraps an envelope and hands the
  content to the verifier its type names. Only keys on the SM2 curve are accepted.
- `gmcrypt.entropy`: random seeds of a chosen `KeyStrength`, and the mnemonic
  error types.
- `gmcrypt.mnemonic` and `gmcrypt.wordlist`: mnemonic sentences in English or
  Simplified Chinese (`Language`), and seeds derived from them.
- `gmcrypt.polynomial` and `gmcrypt.secret_share`: Shamir secret sharing over a
  large prime field.

## Install

```
pip install .
```

## Examples

Hash with SM3:

```python
from gmcrypt.sm3 import sm3_sum

print(sm3_sum(b"abc").hex())
```

Make a mnemonic and derive a seed from it. `generate_entropy` takes a size that
leaves eight bits free; here one byte is appended to fill them:

```python
from gmcrypt.mnemonic import generate_entropy, generate_mnemonic, generate_seed_with_error_checking
from gmcrypt.wordlist import Language

entropy = generate_entropy(120)
sentence = generate_mnemonic(entropy + b"\x02", Language.ENGLISH)
password = "password"
seed = generate_seed_with_error_checking(sentence, password, 40, Language.ENGLISH)
```

Split a secret and put it back together:

```python
from gmcrypt.secret_share import complex_secret_split, complex_secret_retrieve

shares = complex_secret_split(5, 3, b"secret")
subset = {x: shares[x] for x in (1, 3, 5)}
assert complex_secret_retrieve(subset) == b"secret"
```

Sign with Schnorr and verify the enveloped signature:

```python
from gmcrypt import schnorr
from gmcrypt.curve import generate_key_by_seed, SM2_P256
from gmcrypt.verify import xuper_sig_verify

key = generate_key_by_seed(SM2_P256, b"\x01" * 32)
sig = schnorr.sign(key, b"hello")
assert xuper_sig_verify([key.public_key], sig, b"hello")
```

## What it does not do

- It does not create or check SM2 ECDSA signatures. `gmcrypt.ecdsa_der` only
  encodes and decodes `(r, s)` pairs, and `xuper_sig_verify` raises `ValueError`
  for ECDSA envelopes and for data that is not an envelope.
- It has no hierarchical key derivation, no account addresses, and does not
  store or encrypt keys on disk.
- It has no command-line interface; it is a library only.

## Tests

```
pip install .[test]
pytest
```