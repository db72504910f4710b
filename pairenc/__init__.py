"""Pairing-based identity and attribute encryption over BN254.

Two schemes are provided:

* `pairenc.ibe`: Boneh-Franklin identity-based encryption [BF01], with the
  message masked by a hash of the pairing value.
* `pairenc.abe`: a simplified attribute-based encryption in which only the
  first attribute of a ciphertext protects the message and the remaining
  attribute components are carried along unused. Ciphertext-policy and
  key-policy calling styles share one construction.

Both work on byte strings with fixed-width encodings (32-byte scalars,
65-byte G1 points, 130-byte G2 points), see `pairenc.encoding`.

Notes
-----
Labels are mapped into G2 by hashing them to a scalar and multiplying the
generator. This is deterministic and reproducible, but it is not a secure
hash-to-curve construction; see `pairenc.groups`.

References
----------
[BF01] D. Boneh, M. Franklin. Identity-Based Encryption from the Weil
Pairing. CRYPTO 2001.

Examples
--------
Set up master secret and public parameters:

>>> from pairenc import ibe
>>> secret, params = ibe.setup()

Extract the key of an identity and encrypt to it:

>>> key = ibe.extract(secret, "alice@example.com")
>>> ct = ibe.encrypt(params, "alice@example.com", b"hello")
>>> ibe.decrypt(key, ct)
b'hello'

The same with attributes:

>>> from pairenc import abe
>>> sk = abe.keygen(secret, ["doctor", "cardiology"])
>>> ct = abe.encrypt(params, "doctor, cardiology", b"record")
>>> abe.decrypt(sk.key, sk.attributes, ct)
b'record'

Tests and benchmarks substitute a deterministic source of randomness:

>>> from pairenc.rand import SeededRandomSource
>>> secret, params = ibe.setup(rng=SeededRandomSource(b"seed"))
"""

import logging

from pairenc.errors import (AttributeCountMismatch, DecodeError, EntropyUnavailable, InvalidAttributes,
                            InvalidLength, PairencError)
from pairenc.rand import RandomSource, SeededRandomSource

logging.getLogger(__name__).addHandler(logging.NullHandler())
