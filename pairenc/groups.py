"""Label hashing and pairing-based key derivation.

Notes
-----
`hash_to_g2` is a coordinate map, not a random-oracle hash-to-curve: the
label digest is reduced modulo the group order and used as the discrete log
of the point with respect to the fixed G2 generator. It is kept this way so
that derived keys and ciphertexts stay compatible; labels whose digests
agree modulo the order map to the same point.
"""

import hashlib

from py_ecc.optimized_bn128 import G2, multiply, pairing as ate_pairing

from pairenc.encoding import gt_to_binary
from pairenc.params import CURVE_ORDER


def to_label(label):
    """Identities and attributes are hashed as bytes; strings are UTF-8 encoded."""
    if isinstance(label, str):
        return label.encode("utf-8")
    if isinstance(label, (bytes, bytearray)):
        return bytes(label)
    raise TypeError("label must be str or bytes, not {}".format(type(label).__name__))

def digest(data):
    return hashlib.sha256(data).digest()

def hash_to_scalar(label):
    """SHA-256 of the label read as a big-endian integer, reduced mod the group order."""
    return int.from_bytes(digest(to_label(label)), "big") % CURVE_ORDER

def hash_to_g2(label):
    """Map an identity or attribute label to a point of G2.

    Parameters
    ----------
    label : bytes or str
        identity / attribute

    Returns
    -------
    G2 point
        `hash_to_scalar(label)` times the G2 generator
    """
    return multiply(G2, hash_to_scalar(label))

def pair(q, p):
    """Optimal ate pairing e(Q, P) for Q in G2 and P in G1, final exponentiation included."""
    return ate_pairing(q, p)

def derive_key(gt):
    """Turn a GT element into a 32-byte key: SHA-256 of its canonical encoding."""
    return digest(gt_to_binary(gt))

def xor_keystream(data, key):
    """XOR `data` with `key` repeated, byte i with key[i mod len(key)].

    The same key must never mask two different messages.
    """
    n = len(key)
    return bytes(c ^ key[i % n] for i, c in enumerate(data))
