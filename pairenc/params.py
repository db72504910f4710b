"""Curve constants and fixed encoding sizes.

Everything here is derived from the BN254 (alt_bn128) curve as exposed by
`py_ecc.optimized_bn128`; the byte widths are those of the wire format and
must not change without breaking every stored key and ciphertext.
"""

from py_ecc.optimized_bn128 import curve_order, field_modulus

# prime order of G1, G2 and GT
CURVE_ORDER = curve_order
FIELD_MODULUS = field_modulus

# byte widths
SCALAR_BYTES = 32
FP_BYTES = 32
G1_BYTES = 1 + 2 * FP_BYTES
# four Fp2 coordinates plus one trailing zero pad byte
G2_BYTES = 2 + 4 * FP_BYTES
GT_BYTES = 12 * FP_BYTES
KEY_BYTES = 32

# leading flag of an uncompressed point; the point at infinity is all zeros
POINT_UNCOMPRESSED = 0x04
POINT_INFINITY = 0x00

# size of the OS entropy block buffered by RandomSource
RANDOM_BLOCK_BYTES = 32

# the ABE ciphertext stores the attribute count in a single byte
MAX_ATTRIBUTES = 255
POLICY_SEPARATOR = ","
