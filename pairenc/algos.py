#!/usr/bin/env python3

"""Implementation of the IBE algorithms (Setup, Extract, Enc, Dec) and of the
simplified ABE algorithms (KeyGen, Enc, Dec) on group elements.

The byte-level interfaces in `pairenc.ibe` and `pairenc.abe` decode their
inputs and call into this module.
"""

import logging

from py_ecc.optimized_bn128 import G1, multiply

from pairenc.groups import derive_key, hash_to_g2, pair, xor_keystream
from pairenc.objects import ABECiphertext, IBECiphertext
from pairenc.params import CURVE_ORDER
from pairenc.rand import RandomSource

logger = logging.getLogger(__name__)


def setup(rng=None):
    """Generate the master secret and public parameters.

    Parameters
    ----------
    rng : RandomSource (optional)
        source of the master secret; a fresh `RandomSource` by default

    Returns
    -------
    s : int
        master secret in [0, r)
    p_pub : element of G1
        `s` times the G1 generator
    """
    rng = RandomSource() if rng is None else rng
    s = rng.random_scalar()
    p_pub = multiply(G1, s)
    logger.debug("setup: generated master key pair")
    return s, p_pub

def extract(s, label):
    """Private key for one identity (or attribute): `s` * H(label).

    Parameters
    ----------
    s : int
        master secret
    label : bytes or str
        identity

    Returns
    -------
    element of G2
    """
    return multiply(hash_to_g2(label), s % CURVE_ORDER)

def _mask_key(q, p_pub, r):
    # e(Q, P_pub)^r
    return derive_key(pair(q, p_pub) ** r)

def ibe_enc(p_pub, identity, m, rng=None):
    """Encrypt a message to an identity.

    Parameters
    ----------
    p_pub : element of G1
        public parameters
    identity : bytes or str
        recipient identity
    m : bytes
        message
    rng : RandomSource (optional)
        source of the ephemeral scalar `r`

    Returns
    -------
    IBECiphertext
        ``U = r * G1`` and ``V = m XOR H(e(H(id), P_pub)^r)``
    """
    rng = RandomSource() if rng is None else rng
    r = rng.random_scalar()
    u = multiply(G1, r)
    key = _mask_key(hash_to_g2(identity), p_pub, r)
    logger.debug("ibe_enc: %d byte message", len(m))
    return IBECiphertext(u, xor_keystream(m, key))

def ibe_dec(d_id, ct):
    """Decrypt with an extracted key.

    e(d_id, U) = e(s*H(id), r*G1) = e(H(id), P_pub)^r, so the mask is
    recovered whenever `d_id` was extracted for the encryption identity. Any
    other key yields an unrelated byte string, not an error.

    Parameters
    ----------
    d_id : element of G2
        private key
    ct : IBECiphertext

    Returns
    -------
    bytes
    """
    key = derive_key(pair(d_id, ct.u))
    logger.debug("ibe_dec: %d byte ciphertext body", len(ct.v))
    return xor_keystream(ct.v, key)

def keygen(alpha, attributes):
    """One private key component per attribute, each `alpha` * H(attribute)."""
    return [extract(alpha, attr) for attr in attributes]

def abe_enc(p_pub, attributes, m, rng=None):
    """Encrypt under an attribute list.

    Only the first attribute protects the message; the components for the
    other attributes are computed and carried but play no part in masking.

    Parameters
    ----------
    p_pub : element of G1
        public parameters
    attributes : list
        non-empty list of attribute labels
    m : bytes
        message
    rng : RandomSource (optional)
        source of the ephemeral scalar `s`

    Returns
    -------
    ABECiphertext
    """
    rng = RandomSource() if rng is None else rng
    s = rng.random_scalar()
    c0 = multiply(G1, s)
    hashed = [hash_to_g2(attr) for attr in attributes]
    c_attrs = [multiply(h, s) for h in hashed]
    key = _mask_key(hashed[0], p_pub, s)
    logger.debug("abe_enc: %d byte message under %d attributes", len(m), len(attributes))
    return ABECiphertext(c0, xor_keystream(m, key), c_attrs)

def abe_dec(key_components, c0, v):
    """Decrypt with the first key component: m = V XOR H(e(K_0, C0)).

    Only C0 and V of the ciphertext take part; the attribute components are
    not needed. The caller is responsible for checking that the key and
    ciphertext carry the same number of attributes.
    """
    key = derive_key(pair(key_components[0], c0))
    logger.debug("abe_dec: %d byte ciphertext body", len(v))
    return xor_keystream(v, key)
