#!/usr/bin/env python3

"""Fixed-width binary encoding of scalars and group elements.

Layouts (all integers big-endian, 32 bytes per field element):

* scalar: 32 bytes
* G1: ``0x04 || x || y`` (65 bytes)
* G2: ``0x04 || x.im || x.re || y.im || y.re || 0x00`` (130 bytes, the last
  one a zero pad byte that decoding ignores)
* GT: the 12 coefficients of the Fp12 element (384 bytes)

The point at infinity is encoded as all zero bytes. Every decoder checks the
buffer length before reading it and the curve equation before returning a
point.
"""

from py_ecc.optimized_bn128 import FQ, FQ2, b, b2, is_inf, is_on_curve, multiply, normalize, Z1, Z2

from pairenc.errors import DecodeError, InvalidLength
from pairenc.params import (CURVE_ORDER, FIELD_MODULUS, FP_BYTES, G1_BYTES, G2_BYTES, POINT_UNCOMPRESSED,
                            SCALAR_BYTES)


def _int_of(x):
    # py_ecc keeps field coefficients either as FQ objects or as plain ints
    return int(x.n) if hasattr(x, "n") else int(x)

def _fp_to_binary(x):
    return (_int_of(x) % FIELD_MODULUS).to_bytes(FP_BYTES, "big")

def _fp_from_binary(data, offset):
    v = int.from_bytes(data[offset:offset + FP_BYTES], "big")
    if v >= FIELD_MODULUS:
        raise DecodeError("coordinate is not reduced modulo the field prime")
    return v

def _check_length(what, data, size):
    if len(data) < size:
        raise InvalidLength(what, size, len(data))

def scalar_to_binary(k):
    """Encode a scalar as 32 bytes, reducing it modulo the group order first."""
    return (k % CURVE_ORDER).to_bytes(SCALAR_BYTES, "big")

def scalar_from_binary(data):
    """Decode a 32-byte scalar and reduce it modulo the group order.

    Raises
    ------
    InvalidLength
        if `data` is not exactly 32 bytes
    """
    if len(data) != SCALAR_BYTES:
        raise InvalidLength("scalar", SCALAR_BYTES, len(data))
    return int.from_bytes(data, "big") % CURVE_ORDER

def g1_to_binary(pt):
    if is_inf(pt):
        return bytes(G1_BYTES)
    x, y = normalize(pt)
    return bytes([POINT_UNCOMPRESSED]) + _fp_to_binary(x) + _fp_to_binary(y)

def g1_from_binary(data):
    """Decode the first 65 bytes of `data` into a G1 point.

    Parameters
    ----------
    data : bytes
        at least 65 bytes; anything after the point is ignored

    Returns
    -------
    G1 point (projective coordinates)

    Raises
    ------
    InvalidLength
        buffer shorter than 65 bytes
    DecodeError
        bad flag byte, unreduced coordinate or point off the curve
    """
    _check_length("G1 point", data, G1_BYTES)
    data = bytes(data[:G1_BYTES])
    if data == bytes(G1_BYTES):
        return Z1
    if data[0] != POINT_UNCOMPRESSED:
        raise DecodeError("unsupported G1 point flag 0x{:02x}".format(data[0]))
    x = _fp_from_binary(data, 1)
    y = _fp_from_binary(data, 1 + FP_BYTES)
    pt = (FQ(x), FQ(y), FQ.one())
    if not is_on_curve(pt, b):
        raise DecodeError("G1 point is not on the curve")
    return pt

def g2_to_binary(pt):
    if is_inf(pt):
        return bytes(G2_BYTES)
    x, y = normalize(pt)
    x_re, x_im = x.coeffs
    y_re, y_im = y.coeffs
    coords = b"".join(_fp_to_binary(c) for c in (x_im, x_re, y_im, y_re))
    return bytes([POINT_UNCOMPRESSED]) + coords + bytes(1)

def g2_from_binary(data):
    """Decode the first 130 bytes of `data` into a G2 point.

    Besides the curve equation the point must lie in the order-r subgroup,
    since the twist has a non-trivial cofactor and the pairing is only
    bilinear on that subgroup.

    Raises
    ------
    InvalidLength
        buffer shorter than 130 bytes
    DecodeError
        bad flag byte, unreduced coordinate, point off the twist or outside
        the subgroup
    """
    _check_length("G2 point", data, G2_BYTES)
    # the pad byte at the end carries nothing
    data = bytes(data[:G2_BYTES - 1])
    if data == bytes(G2_BYTES - 1):
        return Z2
    if data[0] != POINT_UNCOMPRESSED:
        raise DecodeError("unsupported G2 point flag 0x{:02x}".format(data[0]))
    x_im, x_re, y_im, y_re = (_fp_from_binary(data, 1 + i * FP_BYTES) for i in range(4))
    pt = (FQ2([x_re, x_im]), FQ2([y_re, y_im]), FQ2.one())
    if not is_on_curve(pt, b2):
        raise DecodeError("G2 point is not on the twist")
    if not is_inf(multiply(pt, CURVE_ORDER)):
        raise DecodeError("G2 point is not in the prime-order subgroup")
    return pt

def gt_to_binary(e):
    """Canonical 384-byte encoding of a GT (Fp12) element."""
    return b"".join(_fp_to_binary(c) for c in e.coeffs)

def master_secret_from_binary(data):
    """Master secrets must be exactly 32 bytes."""
    if len(data) != SCALAR_BYTES:
        raise InvalidLength("master secret", SCALAR_BYTES, len(data))
    return scalar_from_binary(data)

def public_params_from_binary(data):
    """Public parameters: at least 65 bytes, the first 65 hold P_pub."""
    _check_length("public parameters", data, G1_BYTES)
    return g1_from_binary(data)
