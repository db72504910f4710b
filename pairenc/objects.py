#!/usr/bin/env python3

"""Objects to represent keys and ciphertexts, with their wire formats.
"""

from pairenc import encoding
from pairenc.errors import InvalidAttributes, InvalidLength
from pairenc.params import G1_BYTES, G2_BYTES, MAX_ATTRIBUTES, POLICY_SEPARATOR


def split_attributes(attributes):
    """Turn a policy string or an attribute iterable into a list of labels.

    Strings and byte strings are comma separated policies; entries are
    trimmed and empty ones dropped. No count check is made here, see
    `parse_attributes`.
    """
    if isinstance(attributes, str):
        attrs = [a.strip() for a in attributes.split(POLICY_SEPARATOR)]
        return [a for a in attrs if a != ""]
    if isinstance(attributes, (bytes, bytearray)):
        attrs = [a.strip() for a in bytes(attributes).split(POLICY_SEPARATOR.encode("ascii"))]
        return [a for a in attrs if a != b""]
    return list(attributes)

def parse_attributes(attributes):
    """Normalise an attribute list or a comma separated policy string.

    Parameters
    ----------
    attributes : str, bytes or iterable of str/bytes
        e.g. ``"A, B,C"``, ``b"A,B"`` or ``["A", "B", "C"]``

    Returns
    -------
    list
        attribute labels, in order

    Raises
    ------
    InvalidAttributes
        if no attribute remains or there are more than 255
    """
    attrs = split_attributes(attributes)
    check_attribute_count(len(attrs))
    return attrs

def check_attribute_count(n):
    if n == 0:
        raise InvalidAttributes("at least one attribute is required")
    if n > MAX_ATTRIBUTES:
        raise InvalidAttributes("at most {} attributes are supported, got {}".format(MAX_ATTRIBUTES, n))


class IBECiphertext:
    """Boneh-Franklin ciphertext

    Parameters
    ----------
    u : element of G1
        `r` times the G1 generator
    v : bytes
        masked message, as long as the message
    """
    def __init__(self, u, v):
        self.u = u
        self.v = bytes(v)

    def to_binary(self):
        """``U(65) || V``"""
        return encoding.g1_to_binary(self.u) + self.v

    @classmethod
    def from_binary(cls, data):
        if len(data) < G1_BYTES:
            raise InvalidLength("ciphertext", G1_BYTES, len(data))
        return cls(encoding.g1_from_binary(data[:G1_BYTES]), data[G1_BYTES:])

    def get_size(self):
        """Calculate the size (in bytes) of the ciphertext."""
        return G1_BYTES + len(self.v)


class ABECiphertext:
    """Ciphertext of the simplified ABE scheme

    Parameters
    ----------
    c0 : element of G1
        `s` times the G1 generator
    v : bytes
        masked message
    c_attrs : list of elements of G2
        `s` times the hash of each attribute; carried but never used to
        unmask the message

    Notes
    -----
    Wire format: ``n(1) || C0(65) || V || Cattr(130) * n``. V has no length
    prefix, it is whatever lies between C0 and the attribute components.
    """
    def __init__(self, c0, v, c_attrs):
        self.c0 = c0
        self.v = bytes(v)
        self.c_attrs = list(c_attrs)

    @property
    def num_attrs(self):
        return len(self.c_attrs)

    def to_binary(self):
        if not 0 < self.num_attrs <= MAX_ATTRIBUTES:
            raise InvalidAttributes("ciphertext must carry between 1 and {} attributes".format(MAX_ATTRIBUTES))
        out = bytes([self.num_attrs]) + encoding.g1_to_binary(self.c0) + self.v
        for c in self.c_attrs:
            out += encoding.g2_to_binary(c)
        return out

    @staticmethod
    def check_binary(data):
        """Validate the layout of an encoded ciphertext without decoding any point.

        Returns
        -------
        int
            the attribute count stored in the header

        Raises
        ------
        InvalidLength
            if the buffer cannot hold the header, C0, a non-empty V and the
            announced number of attribute components
        """
        header = 1 + G1_BYTES
        if len(data) < header:
            raise InvalidLength("ciphertext", header, len(data))
        n = data[0]
        minimum = header + n * G2_BYTES
        if len(data) < minimum:
            raise InvalidLength("ciphertext", minimum, len(data))
        # an empty V is never produced by encryption
        if len(data) == minimum:
            raise InvalidLength("ciphertext", minimum + 1, len(data))
        return n

    @classmethod
    def from_binary(cls, data):
        n, c0, v = cls.header_from_binary(data)
        v_end = len(data) - n * G2_BYTES
        c_attrs = [encoding.g2_from_binary(data[v_end + i * G2_BYTES:v_end + (i + 1) * G2_BYTES])
                   for i in range(n)]
        return cls(c0, v, c_attrs)

    @classmethod
    def header_from_binary(cls, data):
        """Decode C0 and V only, leaving the attribute components untouched.

        This is all decryption needs; the components are neither decoded
        nor checked against the curve.

        Returns
        -------
        tuple
            ``(n, c0, v)``
        """
        n = cls.check_binary(data)
        v_start = 1 + G1_BYTES
        c0 = encoding.g1_from_binary(data[1:v_start])
        return n, c0, bytes(data[v_start:len(data) - n * G2_BYTES])

    def get_size(self):
        """Calculate the size (in bytes) of the ciphertext."""
        return 1 + G1_BYTES + len(self.v) + self.num_attrs * G2_BYTES


class ABEPrivateKey:
    """ABE private key together with the attributes it was generated for.

    The attribute labels are not part of the key bytes; they travel
    alongside so that decryption knows how many components to expect.

    Attributes
    ----------
    key : bytes
        one 130-byte G2 component per attribute
    attributes : list
        attribute labels, same order as the components
    """
    def __init__(self, key, attributes):
        self.key = bytes(key)
        self.attributes = list(attributes)

    @classmethod
    def from_components(cls, components, attributes):
        return cls(b"".join(encoding.g2_to_binary(k) for k in components), attributes)

    @staticmethod
    def components_from_binary(key, count):
        """Decode the first `count` components of an encoded key."""
        if len(key) < count * G2_BYTES:
            raise InvalidLength("private key", count * G2_BYTES, len(key))
        return [encoding.g2_from_binary(key[i * G2_BYTES:(i + 1) * G2_BYTES]) for i in range(count)]

    def components(self):
        return self.components_from_binary(self.key, len(self.attributes))

    def __eq__(self, other):
        if not isinstance(other, ABEPrivateKey):
            return NotImplemented
        return self.key == other.key and self.attributes == other.attributes

    def __repr__(self):
        return "ABEPrivateKey(attributes={!r}, {} bytes)".format(self.attributes, len(self.key))
