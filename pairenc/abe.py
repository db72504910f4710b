"""Simplified attribute-based encryption on byte strings.

The construction is single-attribute IBE with a list of decoy components:
the message is masked with the pairing of the public parameters and the
*first* attribute only, and decryption checks nothing but the attribute
count before using the first key component. Any key whose first attribute
matches the ciphertext's first attribute, and whose attribute count is the
same, decrypts. There is no access-structure evaluation.

The ciphertext-policy and key-policy flavours are the same algorithm seen
from two sides:

* CP: ``keygen(secret, ["A", "B"])`` for a user, ``encrypt(params, "A,B", m)``
  under a policy.
* KP: ``kp_keygen(secret, "A,B")`` under a policy,
  ``kp_encrypt(params, ["A", "B"], m)`` for an attribute set.

Everywhere an attribute list is accepted, a comma separated policy string
works as well.
"""

import logging

from pairenc import algos, encoding, ibe
from pairenc.errors import AttributeCountMismatch, InvalidLength
from pairenc.objects import (ABECiphertext, ABEPrivateKey, check_attribute_count, parse_attributes,
                             split_attributes)
from pairenc.params import G1_BYTES, G2_BYTES

logger = logging.getLogger(__name__)


def setup(rng=None):
    """Same as IBE setup: ``(master_secret, public_params)`` as 32 and 65 bytes."""
    return ibe.setup(rng)

def keygen(master_secret, attributes):
    """Generate a private key for an attribute list.

    Parameters
    ----------
    master_secret : bytes
        32-byte master secret
    attributes : list or str
        attribute labels, or a comma separated policy string

    Returns
    -------
    ABEPrivateKey
        130 bytes per attribute, with the attribute list alongside

    Raises
    ------
    InvalidLength
        if the master secret is not 32 bytes
    InvalidAttributes
        if the attribute list is empty or longer than 255
    """
    alpha = encoding.master_secret_from_binary(master_secret)
    attrs = parse_attributes(attributes)
    sk = ABEPrivateKey.from_components(algos.keygen(alpha, attrs), attrs)
    logger.debug("keygen: %d attributes", len(attrs))
    return sk

def encrypt(public_params, attributes, message, rng=None):
    """Encrypt `message` under an attribute list or policy string.

    Returns
    -------
    bytes
        ``n(1) || C0(65) || V || Cattr(130) * n``

    Raises
    ------
    InvalidLength
        public parameters shorter than 65 bytes, or an empty message (its
        ciphertext could not be told apart from a truncated one)
    InvalidAttributes
        empty or over-long attribute list
    """
    p_pub = encoding.public_params_from_binary(public_params)
    attrs = parse_attributes(attributes)
    message = bytes(message)
    if len(message) == 0:
        raise InvalidLength("message", 1, 0)
    return algos.abe_enc(p_pub, attrs, message, rng).to_binary()

def decrypt(private_key, attributes, ciphertext):
    """Recover the message of an ABE ciphertext.

    Parameters
    ----------
    private_key : bytes
        key bytes as produced by `keygen` (``ABEPrivateKey.key``)
    attributes : list or str
        the attribute list the key was generated for
    ciphertext : bytes

    Raises
    ------
    InvalidLength
        truncated ciphertext or key
    AttributeCountMismatch
        ciphertext and key were made for different numbers of attributes
    InvalidAttributes
        the counts agree but are zero (a malformed ciphertext)
    DecodeError
        a key component or C0 is malformed
    """
    attrs = split_attributes(attributes)
    if len(ciphertext) < 1 + G1_BYTES:
        raise InvalidLength("ciphertext", 1 + G1_BYTES, len(ciphertext))
    if ciphertext[0] != len(attrs):
        raise AttributeCountMismatch(ciphertext[0], len(attrs))
    check_attribute_count(len(attrs))
    ABECiphertext.check_binary(ciphertext)
    # all length checks happen before any point is decoded
    if len(private_key) < len(attrs) * G2_BYTES:
        raise InvalidLength("private key", len(attrs) * G2_BYTES, len(private_key))
    key_components = ABEPrivateKey.components_from_binary(private_key, len(attrs))
    _, c0, v = ABECiphertext.header_from_binary(ciphertext)
    return algos.abe_dec(key_components, c0, v)

cp_keygen = keygen
cp_encrypt = encrypt

def kp_keygen(master_secret, policy):
    """Key-policy key generation: the policy (string or list) is fixed in the key."""
    return keygen(master_secret, policy)

def kp_encrypt(public_params, attributes, message, rng=None):
    """Key-policy encryption under an attribute set."""
    return encrypt(public_params, attributes, message, rng)
