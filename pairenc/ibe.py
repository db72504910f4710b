"""Boneh-Franklin identity-based encryption on byte strings.

>>> from pairenc import ibe
>>> secret, params = ibe.setup()
>>> key = ibe.extract(secret, "alice@example.com")
>>> ct = ibe.encrypt(params, "alice@example.com", b"hello")
>>> ibe.decrypt(key, ct)
b'hello'

Sizes: master secret 32 bytes, public parameters 65, private key 130,
ciphertext 65 + len(message).
"""

import logging

from pairenc import algos, encoding
from pairenc.errors import InvalidLength
from pairenc.objects import IBECiphertext
from pairenc.params import G1_BYTES, G2_BYTES

logger = logging.getLogger(__name__)


def setup(rng=None):
    """Returns ``(master_secret, public_params)`` as 32 and 65 bytes."""
    s, p_pub = algos.setup(rng)
    return encoding.scalar_to_binary(s), encoding.g1_to_binary(p_pub)

def extract(master_secret, identity):
    """Derive the 130-byte private key of `identity`.

    Raises
    ------
    InvalidLength
        if `master_secret` is not 32 bytes
    """
    s = encoding.master_secret_from_binary(master_secret)
    logger.debug("extract: key for identity %r", identity)
    return encoding.g2_to_binary(algos.extract(s, identity))

def encrypt(public_params, identity, message, rng=None):
    """Encrypt `message` to `identity`; returns ``U(65) || V``."""
    p_pub = encoding.public_params_from_binary(public_params)
    return algos.ibe_enc(p_pub, identity, bytes(message), rng).to_binary()

def decrypt(private_key, ciphertext):
    """Recover the message from `ciphertext`.

    A key extracted for another identity returns garbage of the right
    length rather than raising.

    Raises
    ------
    InvalidLength
        private key shorter than 130 bytes or ciphertext shorter than 65
    DecodeError
        key or ciphertext point is malformed
    """
    if len(private_key) < G2_BYTES:
        raise InvalidLength("private key", G2_BYTES, len(private_key))
    if len(ciphertext) < G1_BYTES:
        raise InvalidLength("ciphertext", G1_BYTES, len(ciphertext))
    d_id = encoding.g2_from_binary(private_key)
    ct = IBECiphertext.from_binary(ciphertext)
    return algos.ibe_dec(d_id, ct)
