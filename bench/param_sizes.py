#!/usr/bin/env python

"""Print the sizes of keys and ciphertexts.

Outputs:
- sizes of scalars and elements of G1, G2 and GT
- size of master secret, public parameters and private keys
- size of IBE and ABE ciphertexts for a range of message lengths and attribute counts
"""

from py_ecc.optimized_bn128 import G1, G2, multiply
from pairenc import ibe, abe, encoding
from pairenc.groups import pair
from pairenc.rand import SeededRandomSource

def print_element_sizes(rng):
    print("G1 element size:\t",len(encoding.g1_to_binary(multiply(G1, rng.random_scalar()))))
    print("G2 element size:\t",len(encoding.g2_to_binary(multiply(G2, rng.random_scalar()))))
    print("GT element size:\t",len(encoding.gt_to_binary(pair(G2, G1))))
    print("scalar size:\t\t",len(encoding.scalar_to_binary(rng.random_scalar())))

def print_key_sizes(secret, params, attr_counts):
    print("master secret size:\t",len(secret))
    print("public params size:\t",len(params))
    print("IBE private key size:\t",len(ibe.extract(secret, "alice@example.com")))
    for n in attr_counts:
        sk = abe.keygen(secret, ["attr{}".format(i) for i in range(n)])
        print("ABE private key size ({} attrs):\t{}".format(n, len(sk.key)))

def print_ct_sizes(params, rng, msg_lens, attr_counts):
    for l in msg_lens:
        m = bytes(l)
        print("\nmessage length = {}".format(l))
        print("IBE ciphertext size:\t",len(ibe.encrypt(params, "alice@example.com", m, rng=rng)))
        if l == 0:
            continue
        for n in attr_counts:
            ct = abe.encrypt(params, ["attr{}".format(i) for i in range(n)], m, rng=rng)
            print("ABE ciphertext size ({} attrs):\t{}".format(n, len(ct)))

if __name__ == "__main__":
    rng = SeededRandomSource(b"param_sizes")
    secret, params = ibe.setup(rng=rng)

    print_element_sizes(rng)
    print()

    attr_counts = [1, 5, 20]
    print_key_sizes(secret, params, attr_counts)

    # 0 B ... 1 KB
    msg_lens = [0, 5, 32, 1024]
    print_ct_sizes(params, rng, msg_lens, attr_counts)
